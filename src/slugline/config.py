"""Configuration helpers for loading slug options from YAML."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import SlugOptions
from .presets import get_preset

try:  # pragma: no cover - dependency guaranteed in runtime but guarded for tests
    import yaml
except ImportError:  # pragma: no cover
    yaml = None

__all__ = ["load_slug_config", "options_from_mapping"]

_SECTION_KEY = "slug"
_PRESET_KEY = "preset"


def options_from_mapping(payload: Mapping[str, Any]) -> SlugOptions:
    """Build :class:`SlugOptions` from a configuration mapping.

    The mapping may hold option fields directly or under a ``slug`` section.
    An optional ``preset`` key selects the base options the remaining keys
    override.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("Slug configuration must be a mapping at the top level.")
    section = payload.get(_SECTION_KEY, payload)
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ValueError(f"Slug configuration section '{_SECTION_KEY}' must be a mapping.")

    values = dict(section)
    preset_name = values.pop(_PRESET_KEY, None)
    base = get_preset(str(preset_name)) if preset_name else None
    return SlugOptions.from_mapping(values, base=base)


def load_slug_config(path: Path) -> SlugOptions:
    """Load slug options from the YAML file at ``path``."""

    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"Slug config '{resolved}' does not exist")
    if yaml is None:
        raise ImportError("PyYAML is required to parse slug configuration files.")

    data = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Slug configuration must be a mapping at the top level.")
    return options_from_mapping(data)
