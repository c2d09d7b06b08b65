"""Stable short hashes used for fallback slug suffixes."""
from __future__ import annotations

import hashlib

__all__ = ["stable_hash", "to_base36"]

_BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    """Render a non-negative integer in lowercase base 36."""

    if value < 0:
        raise ValueError("to_base36 expects a non-negative integer")
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def stable_hash(text: str, *, length: int = 6) -> str:
    """Return a deterministic base-36 digest of ``text``.

    The digest is derived from SHA-256 rather than :func:`hash` so it is
    identical across processes and interpreter runs.
    """

    digest = hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).digest()
    encoded = to_base36(int.from_bytes(digest[:8], "big")).rjust(length, "0")
    return encoded[:length]
