"""Named option bundles."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import SlugConfigError, SlugOptions

__all__ = ["PRESETS", "get_preset"]

PRESETS: Mapping[str, SlugOptions] = MappingProxyType(
    {
        # ASCII-only identifiers for URLs and file names.
        "safe": SlugOptions(
            alphabet="ascii",
            unknown="hex",
            emoji="remove",
            symbols="basic",
            tech=True,
            mode="classic",
            max_length=80,
        ),
        "cyber": SlugOptions(
            alphabet="ascii",
            unknown="hex",
            emoji="name",
            symbols="extended",
            tech=True,
            mode="semantic",
            stopwords="auto",
            max_length=60,
        ),
        "unicode": SlugOptions(
            alphabet="unicode",
            emoji="name",
            symbols="extended",
            tech=True,
            mode="semantic",
            stopwords="auto",
            max_length=80,
        ),
    }
)


def get_preset(name: str) -> SlugOptions:
    """Return the preset called ``name``."""

    try:
        return PRESETS[name]
    except KeyError as exc:
        raise SlugConfigError(f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}") from exc
