"""Word segmentation backends.

The locale-aware backend relies on ICU word break iteration through PyICU,
which is an optional dependency. When it cannot be imported the module falls
back to matching runs of Unicode letters, marks and numbers. The backend is
chosen once at import time.
"""
from __future__ import annotations

import logging
import unicodedata
from typing import Protocol, runtime_checkable

try:  # pragma: no cover - optional dependency, exercised when installed
    import icu
except ImportError:  # pragma: no cover
    icu = None

__all__ = [
    "IcuWordSegmenter",
    "Segmenter",
    "UnicodeRunSegmenter",
    "WhitespaceSegmenter",
    "default_segmenter",
    "lowercase_token",
]

logger = logging.getLogger(__name__)

_WORD_CATEGORIES = ("L", "M", "N")
# ICU rule status values below this mark punctuation, spaces and symbols.
_ICU_WORD_NONE_LIMIT = 100
_TURKIC_LANGUAGES = frozenset({"tr", "az"})


@runtime_checkable
class Segmenter(Protocol):
    """Splits normalized text into word-like tokens."""

    name: str
    locale_aware: bool

    def segment(self, text: str, locale: str) -> list[str]:
        ...

    def lower(self, token: str, locale: str) -> str:
        ...


def _language(locale: str) -> str:
    return locale.replace("_", "-").split("-", 1)[0].lower()


def lowercase_token(token: str, locale: str) -> str:
    """Lowercase ``token`` honoring the dotted/dotless i rules of Turkic locales."""

    if _language(locale) in _TURKIC_LANGUAGES:
        token = token.replace("I", "ı").replace("İ", "i")
    return token.lower()


class IcuWordSegmenter:
    """Locale-aware segmentation using ICU word boundaries."""

    name = "icu"
    locale_aware = True

    def __init__(self) -> None:
        if icu is None:
            raise RuntimeError("PyICU is required for IcuWordSegmenter")

    def segment(self, text: str, locale: str) -> list[str]:
        if not text:
            return []
        # ICU offsets count UTF-16 units, so slice the ICU string rather than ``text``.
        source = icu.UnicodeString(text)
        iterator = icu.BreakIterator.createWordInstance(icu.Locale(locale))
        iterator.setText(source)

        tokens: list[str] = []
        start = iterator.first()
        end = iterator.nextBoundary()
        while end != icu.BreakIterator.DONE:
            if iterator.getRuleStatus() >= _ICU_WORD_NONE_LIMIT:
                tokens.append(str(source[start:end]))
            start = end
            end = iterator.nextBoundary()
        return tokens

    def lower(self, token: str, locale: str) -> str:
        return str(icu.UnicodeString(token).toLower(icu.Locale(locale)))


class UnicodeRunSegmenter:
    """Fallback segmentation over maximal runs of letters, marks and numbers."""

    name = "unicode-runs"
    locale_aware = False

    def segment(self, text: str, locale: str) -> list[str]:
        del locale
        tokens: list[str] = []
        current: list[str] = []
        for char in text:
            if unicodedata.category(char).startswith(_WORD_CATEGORIES):
                current.append(char)
                continue
            if current:
                tokens.append("".join(current))
                current = []
        if current:
            tokens.append("".join(current))
        return tokens

    def lower(self, token: str, locale: str) -> str:
        return lowercase_token(token, locale)


class WhitespaceSegmenter:
    """Last-resort segmentation that only splits on whitespace."""

    name = "whitespace"
    locale_aware = False

    def segment(self, text: str, locale: str) -> list[str]:
        del locale
        return text.split()

    def lower(self, token: str, locale: str) -> str:
        return lowercase_token(token, locale)


def _select_segmenter() -> Segmenter:
    if icu is not None:
        return IcuWordSegmenter()
    logger.debug("PyICU unavailable; using Unicode run segmentation")
    return UnicodeRunSegmenter()


_DEFAULT_SEGMENTER: Segmenter = _select_segmenter()


def default_segmenter() -> Segmenter:
    """Return the process-wide segmenter chosen at import time."""

    return _DEFAULT_SEGMENTER
