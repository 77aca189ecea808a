"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared filesystem anchors and cross-cutting constants that many modules
can import.
"""

import os
from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent
# From src/sqlselect/global_config.py, go up two levels: src/sqlselect -> src -> repo root
PROJECT_ROOT: Path = PACKAGE_ROOT.parent.parent

# Core Names
PROJECT_NAME = "sqlselect"

# Database directories
DB_DIR: Path = PROJECT_ROOT / "db"

# Environment override for the default SQLite database file
DB_PATH_ENV_VAR = "SQLSELECT_DB_PATH"


def default_db_path() -> Path:
    """Return the default SQLite database path.

    Honors the SQLSELECT_DB_PATH environment variable, read at call time so
    tests and shells can redirect it without re-importing this module.
    """
    override = os.environ.get(DB_PATH_ENV_VAR)
    if override:
        return Path(override)
    return DB_DIR / f"{PROJECT_NAME}-dev.sqlite"
