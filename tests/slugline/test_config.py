"""Tests for YAML slug configuration loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from slugline.config import load_slug_config, options_from_mapping
from slugline.models import SlugConfigError


def test_load_slug_config_accepts_flat_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "slug.yaml"
    config_path.write_text(
        "separator: _\nalphabet: ascii\nsymbols: false\nstopwords: [foo, bar]\nreserved:\n  - admin\n",
        encoding="utf-8",
    )

    options = load_slug_config(config_path)

    assert options.separator == "_"
    assert options.alphabet == "ascii"
    assert options.symbols is None
    assert options.stopwords == ("foo", "bar")
    assert options.reserved == ("admin",)


def test_load_slug_config_applies_preset_section(tmp_path: Path) -> None:
    config_path = tmp_path / "slug.yaml"
    config_path.write_text("slug:\n  preset: cyber\n  max_length: 30\n", encoding="utf-8")

    options = load_slug_config(config_path)

    assert options.alphabet == "ascii"
    assert options.emoji == "name"
    assert options.max_length == 30


def test_load_slug_config_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    options = load_slug_config(config_path)

    assert options.separator == "-"
    assert options.alphabet == "unicode"


def test_load_slug_config_rejects_non_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("- not a mapping\n- another entry\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_slug_config(config_path)


def test_load_slug_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_slug_config(tmp_path / "missing.yaml")


def test_load_slug_config_rejects_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("separator: /\n", encoding="utf-8")

    with pytest.raises(SlugConfigError, match="separator"):
        load_slug_config(config_path)


def test_options_from_mapping_rejects_bad_sections() -> None:
    with pytest.raises(ValueError, match="must be a mapping"):
        options_from_mapping({"slug": ["separator"]})
    with pytest.raises(SlugConfigError, match="Unknown slug options"):
        options_from_mapping({"slug": {"colour": "blue"}})
    with pytest.raises(SlugConfigError, match="Unknown preset"):
        options_from_mapping({"preset": "missing"})
