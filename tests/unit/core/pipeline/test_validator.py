from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String/Number to Bool).
2. Default value injection and path normalization.
3. Strict mode validation.
"""

import os
from pathlib import Path

import pytest

from treescaffold.core.pipeline.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["input_source"] == "-"
    assert cfg["verbose"] is False
    assert cfg["output_dir"] == os.path.abspath(os.getcwd())
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["encoding"] == "utf-8"
    assert cfg["log_level"] == "INFO"
    assert cfg["dry_run"] is False
    assert warnings == []


def test_validate_converts_strings_and_numbers_to_bools() -> None:
    cfg, warnings = validate_config({"verbose": "yes", "dry_run": 0})

    assert cfg["verbose"] is True
    assert cfg["dry_run"] is False
    assert len(warnings) == 2


def test_validate_normalizes_output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCAFFOLD_TARGET", str(tmp_path))

    cfg, _ = validate_config({"output_dir": "$SCAFFOLD_TARGET/sub"})

    assert cfg["output_dir"] == os.path.join(str(tmp_path), "sub")


def test_validate_blank_strings_fall_back() -> None:
    cfg, _ = validate_config({"input_source": "   ", "encoding": ""})

    assert cfg["input_source"] == "-"
    assert cfg["encoding"] == "utf-8"


def test_validate_unknown_level_and_encoding() -> None:
    cfg, warnings = validate_config({"log_level": "chatty", "encoding": "no-such-codec"})

    assert cfg["log_level"] == "INFO"
    assert cfg["encoding"] == "utf-8"
    assert len(warnings) == 2


def test_validate_level_is_upper_cased() -> None:
    cfg, warnings = validate_config({"log_level": "debug"})

    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"verbose": "maybe"}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"output_dir": 42}, strict=True)

    with pytest.raises(TypeError):
        validate_config(["not", "a", "dict"], strict=True)

    with pytest.raises(ValueError):
        validate_config({"encoding": "no-such-codec"}, strict=True)


def test_validate_wrong_type_uses_fallback() -> None:
    cfg, warnings = validate_config({"input_source": 3.14})

    assert cfg["input_source"] == "-"
    assert any("input_source" in w for w in warnings)
