from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the primitive write operations
used by the scaffold builder. Acts as an abstraction over the 'os' module
to ensure uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeScaffold"
UNIX_APP_DIR_NAME = ".treescaffold"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeScaffold
    - Linux/Mac: ~/.treescaffold

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# WRITE PRIMITIVES
# -----------------------------------------------------------------------------

def ensure_dir(path: str) -> None:
    """
    Recursively create a directory and any missing ancestors.

    Pre-existing directories are not an error.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    os.makedirs(path, exist_ok=True)


def write_empty_file(path: str) -> None:
    """
    Create an empty file, truncating any existing file at the same path.

    Missing parent directories are created first.

    Raises:
        OSError: If the parent hierarchy or the file cannot be written.
    """
    parent = os.path.dirname(path)
    if parent:
        ensure_dir(parent)
    with open(path, "w", encoding="utf-8"):
        pass
