"""Per-context collection of live box handles."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from overlay_boxes.host import BoxHandle


class BoxRegistry:
    """Insertion-ordered handles created by one controller and not yet deleted."""

    def __init__(self) -> None:
        self._handles: List[BoxHandle] = []

    def add(self, handle: BoxHandle) -> None:
        self._handles.append(handle)

    def remove(self, handle: BoxHandle) -> None:
        try:
            self._handles.remove(handle)
        except ValueError:
            return

    def all(self) -> Tuple[BoxHandle, ...]:
        return tuple(self._handles)

    def clear(self) -> None:
        self._handles.clear()

    def __contains__(self, handle: object) -> bool:
        return handle in self._handles

    def __iter__(self) -> Iterator[BoxHandle]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._handles)
