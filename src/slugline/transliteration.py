"""ASCII transliteration of individual tokens."""
from __future__ import annotations

import unicodedata
from typing import Callable

from .tables import transliterate_char

__all__ = ["to_ascii_tokens"]

# ASCII characters that can serve as slug separators split sub-tokens.
_ASCII_BOUNDARIES = frozenset("-_.")


def _strip_marks(token: str) -> str:
    decomposed = unicodedata.normalize("NFKD", token)
    return "".join(char for char in decomposed if not unicodedata.category(char).startswith("M"))


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def to_ascii_tokens(
    token: str,
    unknown: str = "hex",
    *,
    lowercase: bool = True,
    on_hex: Callable[[str], None] | None = None,
) -> list[str]:
    """Transliterate ``token`` into zero or more ASCII sub-tokens.

    Characters found in the Latin-special, Greek or Cyrillic tables are
    replaced, ASCII letters and digits pass through, and every other
    character ends the current sub-token. With ``unknown="hex"`` a non-ASCII
    character that no table covers becomes its own ``u<codepoint>`` sub-token;
    with ``unknown="drop"`` it is discarded. ``on_hex`` is called with each
    character that was hex-encoded.

    >>> to_ascii_tokens("Straße")
    ['strasse']
    >>> to_ascii_tokens("你好")
    ['u4f60', 'u597d']
    """

    parts: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            parts.append("".join(buffer))
            buffer.clear()

    for char in _strip_marks(token):
        mapped = transliterate_char(char)
        if mapped is not None:
            if not lowercase and char != char.lower():
                mapped = mapped.capitalize()
            buffer.append(mapped)
            continue

        if _is_ascii_alnum(char):
            buffer.append(char.lower() if lowercase else char)
            continue

        if char.isascii():
            if char in _ASCII_BOUNDARIES:
                flush()
            continue

        flush()
        if unknown == "hex":
            parts.append(f"u{ord(char):x}")
            if on_hex is not None:
                on_hex(char)

    flush()
    return [part for part in parts if part]
