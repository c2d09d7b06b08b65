"""Deterministic, URL- and filesystem-safe slugs from arbitrary text."""
from __future__ import annotations

from .config import load_slug_config
from .models import (
    FallbackContext,
    SlugConfigError,
    SlugOptions,
    SlugResult,
    SlugStep,
    SuggestionContext,
)
from .pipeline import create_slugger, slug, slug_detailed
from .presets import PRESETS, get_preset
from .suggest import slug_async
from .unique import unique_slug

slugify = slug
slugify_detailed = slug_detailed

__all__ = [
    "PRESETS",
    "FallbackContext",
    "SlugConfigError",
    "SlugOptions",
    "SlugResult",
    "SlugStep",
    "SuggestionContext",
    "create_slugger",
    "get_preset",
    "load_slug_config",
    "slug",
    "slug_async",
    "slug_detailed",
    "slugify",
    "slugify_detailed",
    "unique_slug",
]
