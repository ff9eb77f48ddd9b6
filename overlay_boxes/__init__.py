from .adapter import HostSurfaceAdapter
from .config import BoxSettings, load_settings
from .controller import BoxController
from .errors import BoxError, DeadHandle, HostUnavailable, InvalidGeometry
from .geometry import CellMetrics, CellSize, pixels_to_cells
from .host import BoxHandle, FaceOverride, HostSurface, SurfaceParams
from .registry import BoxRegistry
from .style import DEFAULT_STYLE, StyleRecord, merge
from .version import __version__

__all__ = [
    "__version__",
    "BoxController",
    "BoxRegistry",
    "BoxHandle",
    "BoxSettings",
    "load_settings",
    "HostSurface",
    "HostSurfaceAdapter",
    "SurfaceParams",
    "FaceOverride",
    "StyleRecord",
    "DEFAULT_STYLE",
    "merge",
    "CellMetrics",
    "CellSize",
    "pixels_to_cells",
    "BoxError",
    "InvalidGeometry",
    "DeadHandle",
    "HostUnavailable",
]
