"""Fallback slug generation for inputs that yield nothing usable."""
from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from .hashing import stable_hash
from .models import FallbackContext, FallbackSpec
from .sanitize import collapse_separators

__all__ = [
    "DEFAULT_FALLBACK_BASE",
    "CallableFallback",
    "FallbackStrategy",
    "LiteralFallback",
    "generate_fallback",
    "resolve_fallback",
]

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_BASE = "untitled"
_NON_ASCII_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True, slots=True)
class LiteralFallback:
    """Fallback strategy that always proposes the same base string."""

    text: str

    def base(self, normalized_input: str, context: FallbackContext) -> str:
        del normalized_input, context
        return self.text


@dataclass(frozen=True, slots=True)
class CallableFallback:
    """Fallback strategy delegating to a caller-supplied pure function."""

    func: Callable[[str, FallbackContext], str]

    def base(self, normalized_input: str, context: FallbackContext) -> str:
        return self.func(normalized_input, context)


FallbackStrategy = Union[LiteralFallback, CallableFallback]


def resolve_fallback(value: FallbackSpec) -> FallbackStrategy | None:
    """Turn a fallback option value into a strategy object."""

    if value is None:
        return None
    if isinstance(value, (LiteralFallback, CallableFallback)):
        return value
    if isinstance(value, str):
        return LiteralFallback(value)
    if callable(value):
        return CallableFallback(value)
    raise TypeError(f"Unsupported fallback strategy: {value!r}")


def _sanitize_base(base: str, separator: str) -> str:
    decomposed = unicodedata.normalize("NFKD", base).lower()
    decomposed = "".join(char for char in decomposed if not unicodedata.combining(char))
    return collapse_separators(_NON_ASCII_ALNUM_PATTERN.sub(separator, decomposed), separator)


def generate_fallback(
    normalized_input: str,
    separator: str,
    tokens: Sequence[str],
    strategy: FallbackStrategy | None = None,
) -> str:
    """Return a non-empty ``<base><separator><hash>`` slug.

    The hash is computed from ``normalized_input`` so different inputs get
    different fallbacks even when the strategy returns a constant.
    """

    suffix = stable_hash(normalized_input)
    base = DEFAULT_FALLBACK_BASE
    if strategy is not None:
        proposed = strategy.base(normalized_input, FallbackContext(tuple(tokens), separator))
        if isinstance(proposed, str) and proposed.strip():
            base = proposed.strip()
        else:
            logger.debug("Fallback strategy returned a blank base; using %r", DEFAULT_FALLBACK_BASE)

    cleaned = _sanitize_base(base, separator) or DEFAULT_FALLBACK_BASE
    return f"{cleaned}{separator}{suffix}"
