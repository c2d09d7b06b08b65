"""Structural sanitization helpers for joined slugs."""
from __future__ import annotations

import re
import unicodedata
from functools import lru_cache

__all__ = [
    "collapse_separators",
    "neutralize_slashes",
    "sanitize_strict",
    "truncate_at_boundary",
]

_SLASH_PATTERN = re.compile(r"[/\\]+")


@lru_cache(maxsize=None)
def _separator_patterns(separator: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    escaped = re.escape(separator)
    return re.compile(f"{escaped}{{2,}}"), re.compile(f"^{escaped}+|{escaped}+$")


def neutralize_slashes(slug: str, separator: str) -> str:
    """Replace forward and back slash runs with ``separator``."""

    return _SLASH_PATTERN.sub(separator, slug)


def collapse_separators(slug: str, separator: str) -> str:
    """Collapse repeated separators and trim them from both ends."""

    if not slug:
        return slug
    repeated, edges = _separator_patterns(separator)
    return edges.sub("", repeated.sub(separator, slug))


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def sanitize_strict(slug: str, separator: str, alphabet: str) -> str:
    """Drop every character outside the allowed alphabet plus ``separator``.

    In ``ascii`` mode only ASCII letters and digits survive. In ``unicode``
    mode letters and numbers survive, along with combining marks that directly
    follow a surviving letter or number.
    """

    kept: list[str] = []
    if alphabet == "ascii":
        for char in slug:
            if char == separator or _is_ascii_alnum(char):
                kept.append(char)
        return "".join(kept)

    previous_was_word = False
    for char in slug:
        if char == separator:
            kept.append(char)
            previous_was_word = False
            continue
        category = unicodedata.category(char)
        if category[0] in ("L", "N"):
            kept.append(char)
            previous_was_word = True
        elif category[0] == "M" and previous_was_word:
            kept.append(char)
        else:
            previous_was_word = False
    return "".join(kept)


def truncate_at_boundary(slug: str, separator: str, max_length: int) -> str:
    """Cut ``slug`` to ``max_length`` without splitting a token when possible."""

    if len(slug) <= max_length:
        return slug
    cut = slug[:max_length]
    if slug[max_length] != separator:
        index = cut.rfind(separator)
        if index > 0:
            cut = cut[:index]
    return collapse_separators(cut, separator)
