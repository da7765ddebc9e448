from __future__ import annotations

"""
Integration tests for the scaffold pipeline.

Runs complete listings through reading, parsing and building against a
temporary output root.
"""

import io
from pathlib import Path
from typing import Any, Dict, List
from unittest.mock import patch

from treescaffold.core.pipeline.engine import run_scaffold
from treescaffold.domain.scaffold_models import CreatedEntry


def _config(mock_config_dict: Dict[str, Any], listing: Path, out: Path, **extra: Any) -> Dict[str, Any]:
    cfg = dict(mock_config_dict)
    cfg["input_source"] = str(listing)
    cfg["output_dir"] = str(out)
    cfg.update(extra)
    return cfg


def test_tree_listing_builds_expected_hierarchy(
        tmp_path: Path, tree_listing: str, mock_config_dict: Dict[str, Any]
) -> None:
    listing = tmp_path / "tree.txt"
    listing.write_text(tree_listing, encoding="utf-8")
    out = tmp_path / "out"

    result = run_scaffold(_config(mock_config_dict, listing, out))

    assert result.ok, result.error
    project = out / "project"
    assert (project / "src" / "app" / "__init__.py").is_file()
    assert (project / "src" / "app" / "main.py").is_file()
    assert (project / "src" / "utils.py").is_file()
    assert (project / "tests" / "test_main.py").is_file()
    assert (project / "README.md").is_file()
    assert not (project / "src" / "app" / "utils.py").exists()

    assert result.lines_read == 10
    assert result.lines_skipped == 1
    assert result.dirs_created == 4
    assert result.files_created == 5


def test_indent_listing_builds_expected_hierarchy(
        tmp_path: Path, indent_listing: str, mock_config_dict: Dict[str, Any]
) -> None:
    listing = tmp_path / "outline.txt"
    listing.write_text(indent_listing, encoding="utf-8")
    out = tmp_path / "out"

    result = run_scaffold(_config(mock_config_dict, listing, out))

    assert result.ok
    assert (out / "docs" / "index.md").is_file()
    assert (out / "docs" / "guide" / "install.md").is_file()
    assert (out / "setup.cfg").is_file()
    assert result.lines_skipped == 1


def test_stdin_source(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    out = tmp_path / "out"
    cfg = dict(mock_config_dict, input_source="-", output_dir=str(out))

    result = run_scaffold(cfg, stdin=io.StringIO("a/\n    b.txt\n"))

    assert result.ok
    assert (out / "a" / "b.txt").is_file()


def test_dry_run_reports_without_creating(
        tmp_path: Path, tree_listing: str, mock_config_dict: Dict[str, Any]
) -> None:
    listing = tmp_path / "tree.txt"
    listing.write_text(tree_listing, encoding="utf-8")
    out = tmp_path / "out"

    result = run_scaffold(_config(mock_config_dict, listing, out, dry_run=True))

    assert result.ok
    assert result.dry_run is True
    assert len(result.entries) == 9
    assert not out.exists()


def test_on_created_receives_every_entry(
        tmp_path: Path, indent_listing: str, mock_config_dict: Dict[str, Any]
) -> None:
    listing = tmp_path / "outline.txt"
    listing.write_text(indent_listing, encoding="utf-8")
    seen: List[CreatedEntry] = []

    result = run_scaffold(_config(mock_config_dict, listing, tmp_path / "out"), on_created=seen.append)

    assert seen == result.entries


def test_unreadable_input_creates_nothing(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    out = tmp_path / "out"

    result = run_scaffold(_config(mock_config_dict, tmp_path / "missing.txt", out))

    assert result.ok is False
    assert "missing.txt" in result.error
    assert result.summary["stage"] == "read"
    assert not out.exists()


def test_build_failure_keeps_partial_entries(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    listing = tmp_path / "tree.txt"
    listing.write_text("first/\nclash/\nlast/\n", encoding="utf-8")
    out = tmp_path / "out"
    out.mkdir()
    (out / "clash").write_text("", encoding="utf-8")

    result = run_scaffold(_config(mock_config_dict, listing, out))

    assert result.ok is False
    assert result.summary["stage"] == "build"
    assert [Path(e.path).name for e in result.entries] == ["first"]
    assert (out / "first").is_dir()
    assert not (out / "last").exists()


def test_unusable_name_is_a_build_failure(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    listing = tmp_path / "tree.txt"
    listing.write_text("ok/\nbad\x00name\n", encoding="utf-8")
    out = tmp_path / "out"

    result = run_scaffold(_config(mock_config_dict, listing, out))

    assert result.ok is False
    assert result.summary["stage"] == "build"
    assert [Path(e.path).name for e in result.entries] == ["ok"]
    assert (out / "ok").is_dir()


def test_invalid_config_values_are_tolerated(
        tmp_path: Path, indent_listing: str, mock_config_dict: Dict[str, Any]
) -> None:
    listing = tmp_path / "outline.txt"
    listing.write_text(indent_listing, encoding="utf-8")

    with patch("treescaffold.core.pipeline.engine.logger") as mock_logger:
        result = run_scaffold(_config(mock_config_dict, listing, tmp_path / "out", verbose="sure"))

    assert result.ok
    assert mock_logger.warning.called
