#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Thoughty project.

All paths are Path objects relative to the project root:
    ROOT/
    ├── thoughty/      # Package code
    ├── data/          # User data (database, exports)
    └── logs/          # Application logs

Paths are computed at import time; directories are created lazily by the
code that writes into them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/thoughty/core/paths.py.

    Returns:
        Path object for project root
    """
    # Navigate up: paths.py -> core/ -> thoughty/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "thoughty"

# ---- Data ----
DATA_DIR = ROOT / "data"
DB_PATH = DATA_DIR / "thoughty.db"
EXPORT_DIR = DATA_DIR / "exports"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
