from __future__ import annotations

from nav_json.cli import main

raise SystemExit(main())
