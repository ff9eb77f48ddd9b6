from overlay_boxes.demo import main

raise SystemExit(main())
