"""Helpers for probing caller-owned namespaces for a free slug."""
from __future__ import annotations

import time
from typing import Callable

from .models import SEPARATORS, SlugConfigError

__all__ = ["unique_slug"]


def unique_slug(
    base: str,
    is_taken: Callable[[str], bool],
    *,
    separator: str = "-",
    max_attempts: int = 1000,
    clock: Callable[[], float] = time.time,
) -> str:
    """Return ``base`` or the first free ``<base><sep><n>`` candidate.

    When every numbered candidate up to ``max_attempts`` is taken, a
    millisecond timestamp is appended instead.
    """

    if separator not in SEPARATORS:
        raise SlugConfigError(f"separator must be one of {', '.join(repr(sep) for sep in SEPARATORS)}")
    if not is_taken(base):
        return base
    for index in range(1, max_attempts + 1):
        candidate = f"{base}{separator}{index}"
        if not is_taken(candidate):
            return candidate
    return f"{base}{separator}{int(clock() * 1000)}"
