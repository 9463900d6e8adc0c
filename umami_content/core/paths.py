#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the Umami demo content seeder.

This module defines all project paths as Path objects for consistent path
handling across the codebase.

The project structure:
    ROOT/
    ├── umami_content/            # Package code
    │   └── default_content/      # Bundled CSV files, bodies and images
    ├── data/                     # Runtime data
    │   ├── umami_content.db      # Content store (SQLite)
    │   ├── alembic/              # Alembic environment
    │   └── files/                # Managed file storage (public://)
    └── logs/                     # Application logs

Runtime paths can be overridden from the CLI or a YAML config file;
the bundled content directory always resolves relative to the package.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/umami_content/core/paths.py and navigates
    up the directory tree to find ROOT.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If the package directory cannot be found under ROOT
    """
    current_file = Path(__file__).resolve()

    # Navigate up: paths.py -> core/ -> umami_content/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "umami_content").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'umami_content'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "umami_content"

# --- Bundled seed data ---
DEFAULT_CONTENT_DIR = PACKAGE_DIR / "default_content"

# --- Content store ---
DATA_DIR = ROOT / "data"
DB_PATH = DATA_DIR / "umami_content.db"
ALEMBIC_DIR = DATA_DIR / "alembic"
FILES_DIR = DATA_DIR / "files"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
