"""Character-level normalization and rewrite stages."""
from __future__ import annotations

import re
import unicodedata

from .tables import PICTOGRAPHIC_PATTERN, emoji_names, symbol_table

__all__ = [
    "collapse_whitespace",
    "effective_emoji_policy",
    "normalize_input",
    "rewrite_emoji",
    "rewrite_symbols",
    "rewrite_tech",
]

_DASH_PATTERN = re.compile("[\u2010-\u2015\u2212\ufe58\ufe63\uff0d]")
_SINGLE_QUOTE_PATTERN = re.compile("[\u2018\u2019\u201a\u201b]")
_DOUBLE_QUOTE_PATTERN = re.compile("[\u201c\u201d\u201e\u201f]")
_CONTROL_PATTERN = re.compile("[\x00-\x1f\x7f]")
_ZERO_WIDTH_PATTERN = re.compile("[\u200b\u200c\u200d\u2060\ufeff\ufe00-\ufe0f]")
_SLASH_PATTERN = re.compile(r"[/\\]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_EMOJI_VARIATION_PATTERN = re.compile("[\ufe0e\ufe0f]")

_TECH_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"c\+\+", re.IGNORECASE), " cpp "),
    (re.compile(r"c#", re.IGNORECASE), " csharp "),
    (re.compile(r"f#", re.IGNORECASE), " fsharp "),
    (re.compile(r"\.net\b", re.IGNORECASE), " dotnet "),
    (re.compile(r"\bnode\.js\b", re.IGNORECASE), " nodejs "),
)


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""

    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def _strip_format_characters(text: str) -> str:
    return "".join(char for char in text if unicodedata.category(char) != "Cf")


def normalize_input(text: str) -> str:
    """Return ``text`` canonicalized for the script-aware stages.

    Applies NFKC, folds dash and smart-quote variants to ASCII, turns control
    characters into spaces, removes zero-width, variation-selector and other
    format characters, neutralizes path separators and collapses whitespace.
    """

    normalized = unicodedata.normalize("NFKC", str(text))
    normalized = _DASH_PATTERN.sub("-", normalized)
    normalized = _SINGLE_QUOTE_PATTERN.sub("'", normalized)
    normalized = _DOUBLE_QUOTE_PATTERN.sub('"', normalized)
    normalized = _CONTROL_PATTERN.sub(" ", normalized)
    normalized = _ZERO_WIDTH_PATTERN.sub("", normalized)
    normalized = _strip_format_characters(normalized)
    normalized = _SLASH_PATTERN.sub(" ", normalized)
    return collapse_whitespace(normalized)


def rewrite_tech(text: str, enabled: bool) -> str:
    """Replace well-known technology shorthand (``c++``, ``.net`` ...) with words."""

    if not enabled:
        return text
    rewritten = text
    for pattern, replacement in _TECH_REWRITES:
        rewritten = pattern.sub(replacement, rewritten)
    return collapse_whitespace(rewritten)


def rewrite_symbols(text: str, policy: str | None) -> str:
    """Replace symbols from the ``basic`` or ``extended`` table with words."""

    if not policy:
        return text
    rewritten = text
    for symbol, word in symbol_table(policy):
        rewritten = rewritten.replace(symbol, f" {word} ")
    return collapse_whitespace(rewritten)


def effective_emoji_policy(policy: str, alphabet: str) -> str:
    # ASCII output cannot carry pictographs.
    if policy == "keep" and alphabet == "ascii":
        return "remove"
    return policy


def rewrite_emoji(text: str, policy: str, alphabet: str) -> tuple[str, str]:
    """Apply the emoji policy and return ``(text, policy_used)``."""

    used = effective_emoji_policy(policy, alphabet)
    rewritten = _EMOJI_VARIATION_PATTERN.sub("", text)

    if used == "name":
        for emoji, name in emoji_names():
            rewritten = rewritten.replace(emoji, f" {name} ")
        rewritten = PICTOGRAPHIC_PATTERN.sub(" ", rewritten)
        return collapse_whitespace(rewritten), used

    if used == "remove":
        rewritten = PICTOGRAPHIC_PATTERN.sub(" ", rewritten)
        for emoji, _name in emoji_names():
            rewritten = rewritten.replace(emoji, " ")
        return collapse_whitespace(rewritten), used

    return rewritten, used
