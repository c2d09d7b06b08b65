"""Tests for the slug option and result models."""
from __future__ import annotations

import dataclasses

import pytest

from slugline.models import SlugConfigError, SlugOptions, SlugResult, SlugStep


def test_slug_options_defaults() -> None:
    options = SlugOptions()

    assert options.separator == "-"
    assert options.alphabet == "unicode"
    assert options.max_length == 80
    assert options.effective_max_length == 80
    assert options.symbols == "basic"
    assert options.stopwords is None
    assert options.reserved == ()


@pytest.mark.parametrize(
    "overrides",
    [
        {"separator": "/"},
        {"separator": ""},
        {"separator": "--"},
        {"alphabet": "latin"},
        {"mode": "fancy"},
        {"emoji": "shout"},
        {"symbols": "all"},
        {"unknown": "keep"},
        {"stopwords": "all"},
        {"stopwords": 3},
        {"max_length": -1},
        {"max_length": "10"},
        {"reserved": "admin"},
    ],
)
def test_slug_options_rejects_invalid_values(overrides: dict) -> None:
    with pytest.raises(SlugConfigError):
        SlugOptions(**overrides)


def test_slug_config_error_is_value_error() -> None:
    assert issubclass(SlugConfigError, ValueError)


def test_slug_options_normalizes_values() -> None:
    options = SlugOptions(symbols=False, stopwords=["The", "a"], reserved=["admin"], locale="")  # type: ignore[arg-type]

    assert options.symbols is None
    assert options.stopwords == ("The", "a")
    assert options.reserved == ("admin",)
    assert options.locale == "en"


@pytest.mark.parametrize("value", [0, None])
def test_slug_options_disabled_truncation(value) -> None:
    assert SlugOptions(max_length=value).effective_max_length is None


def test_slug_options_are_frozen() -> None:
    options = SlugOptions()

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.separator = "_"  # type: ignore[misc]


def test_slug_options_merged_returns_validated_copy() -> None:
    base = SlugOptions()
    merged = base.merged(separator="_", alphabet="ascii")

    assert merged.separator == "_"
    assert merged.alphabet == "ascii"
    assert base.separator == "-"
    assert base.merged() is base
    with pytest.raises(SlugConfigError, match="Unknown slug options"):
        base.merged(colour="blue")
    with pytest.raises(SlugConfigError):
        base.merged(separator="+")


def test_slug_options_from_mapping() -> None:
    options = SlugOptions.from_mapping({"separator": "_", "max_length": 40, "stopwords": "auto"})

    assert options.separator == "_"
    assert options.max_length == 40
    assert options.stopwords == "auto"


def test_slug_options_from_mapping_rejects_bad_payloads() -> None:
    with pytest.raises(SlugConfigError, match="mapping"):
        SlugOptions.from_mapping(["separator"])  # type: ignore[arg-type]
    with pytest.raises(SlugConfigError, match="Unknown slug options"):
        SlugOptions.from_mapping({"sep": "-"})
    with pytest.raises(SlugConfigError, match="fallback"):
        SlugOptions.from_mapping({"fallback": 3})


def test_slug_result_coerces_sequences_and_serializes() -> None:
    result = SlugResult(
        input="x",
        slug="x",
        tokens=["x"],
        warnings=["fell-back"],
        steps=[SlugStep(op="join", before="x", after="x", meta={"separator": "-"})],
    )

    assert result.tokens == ("x",)
    assert result.used_fallback is True
    assert result.to_dict() == {
        "input": "x",
        "slug": "x",
        "tokens": ["x"],
        "warnings": ["fell-back"],
        "steps": [{"op": "join", "before": "x", "after": "x", "meta": {"separator": "-"}}],
    }
