from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the per-user data directory and of logging handlers.
3. Shared fixtures for listings and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treescaffold.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Isolation Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the persisted config location away from the real home directory."""
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    monkeypatch.setattr("treescaffold.domain.config.get_user_data_dir", lambda: str(data_dir))
    return data_dir


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Tear down queue listeners so handlers never outlive a captured stream."""
    yield
    shutdown_logging()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def tree_listing() -> str:
    """A `tree`-style listing with comments and guide-only lines."""
    return (
        "project/\n"
        "├── src/\n"
        "│   ├── app/          # application package\n"
        "│   │   ├── __init__.py\n"
        "│   │   └── main.py\n"
        "│   └── utils.py\n"
        "│\n"
        "├── tests/\n"
        "│   └── test_main.py\n"
        "└── README.md\n"
    )


@pytest.fixture
def indent_listing() -> str:
    """A hand-typed outline using tabs and four-space runs."""
    return (
        "docs/\n"
        "\tindex.md\n"
        "\tguide/\n"
        "\t    install.md\n"
        "\n"
        "setup.cfg\n"
    )


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "input_source": str(tmp_path / "listing.txt"),
        "output_dir": str(tmp_path / "out"),
        "encoding": "utf-8",
        "verbose": False,
        "dry_run": False,
        "log_level": "INFO",
        "log_file": "",
    }
