"""Static lookup tables shared by the slug pipeline.

Every table is built once at import time and exposed as a read-only mapping or
``frozenset``. Nothing in the package mutates them, which keeps concurrent
calls free of coordination.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "CYRILLIC_MAP",
    "EMOJI_NAMES",
    "GREEK_MAP",
    "LATIN_SPECIAL_MAP",
    "PICTOGRAPHIC_PATTERN",
    "RESERVED_DEFAULT",
    "STOPWORDS_EN",
    "SYMBOLS_BASIC",
    "SYMBOLS_EXTENDED",
    "emoji_names",
    "is_reserved",
    "symbol_table",
    "transliterate_char",
]

# Keys are lower case; lookups lowercase the input character first.
LATIN_SPECIAL_MAP: Mapping[str, str] = MappingProxyType(
    {
        "ß": "ss",
        "ẞ": "ss",
        "æ": "ae",
        "œ": "oe",
        "ø": "o",
        "ł": "l",
        "đ": "d",
        "ð": "d",
        "þ": "th",
        "ı": "i",
        "ŋ": "ng",
        "ħ": "h",
        "ŧ": "t",
        "ĸ": "k",
        "ŀ": "l",
        "ſ": "s",
        "ǝ": "e",
        "ə": "e",
        "ɛ": "e",
        "ɔ": "o",
        "ʒ": "z",
        "ƒ": "f",
    }
)

GREEK_MAP: Mapping[str, str] = MappingProxyType(
    {
        "α": "a",
        "β": "v",
        "γ": "g",
        "δ": "d",
        "ε": "e",
        "ζ": "z",
        "η": "i",
        "θ": "th",
        "ι": "i",
        "κ": "k",
        "λ": "l",
        "μ": "m",
        "ν": "n",
        "ξ": "x",
        "ο": "o",
        "π": "p",
        "ρ": "r",
        "σ": "s",
        "ς": "s",
        "τ": "t",
        "υ": "y",
        "φ": "f",
        "χ": "ch",
        "ψ": "ps",
        "ω": "o",
    }
)

CYRILLIC_MAP: Mapping[str, str] = MappingProxyType(
    {
        "а": "a",
        "б": "b",
        "в": "v",
        "г": "g",
        "д": "d",
        "е": "e",
        "ж": "zh",
        "з": "z",
        "и": "i",
        "к": "k",
        "л": "l",
        "м": "m",
        "н": "n",
        "о": "o",
        "п": "p",
        "р": "r",
        "с": "s",
        "т": "t",
        "у": "u",
        "ф": "f",
        "х": "kh",
        "ц": "ts",
        "ч": "ch",
        "ш": "sh",
        "щ": "shch",
        "ъ": "",
        "ы": "y",
        "ь": "",
        "э": "e",
        "ю": "yu",
        "я": "ya",
        "є": "ye",
        "і": "i",
        "ґ": "g",
        "ђ": "dj",
        "ј": "j",
        "љ": "lj",
        "њ": "nj",
        "ћ": "c",
        "џ": "dz",
        "ѕ": "dz",
    }
)

SYMBOLS_BASIC: Mapping[str, str] = MappingProxyType(
    {
        "&": "and",
        "@": "at",
        "%": "percent",
        "+": "plus",
    }
)

SYMBOLS_EXTENDED: Mapping[str, str] = MappingProxyType(
    {
        **SYMBOLS_BASIC,
        "#": "hash",
        "$": "dollar",
        "€": "euro",
        "£": "pound",
        "¥": "yen",
        "₽": "ruble",
        "₹": "rupee",
        "©": "copyright",
        "®": "registered",
        "°": "degrees",
        "=": "equals",
        "<": "less",
        ">": "greater",
        "|": "or",
        "~": "tilde",
        "×": "times",
        "÷": "divided",
        "∞": "infinity",
        "≈": "approx",
        "≠": "not equal",
        "→": "to",
        "←": "from",
        "♥": "love",
        "§": "section",
        "¶": "paragraph",
    }
)

# Variation selectors are stripped before lookup, so keys carry none.
EMOJI_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "🚀": "rocket",
        "🔥": "fire",
        "❤": "heart",
        "💔": "broken heart",
        "⭐": "star",
        "🌟": "glowing star",
        "✨": "sparkles",
        "✅": "check",
        "❌": "cross",
        "⚠": "warning",
        "⚡": "zap",
        "🎉": "party",
        "🎂": "cake",
        "🎁": "gift",
        "💡": "idea",
        "📦": "package",
        "🐛": "bug",
        "🔒": "lock",
        "🔑": "key",
        "🔧": "wrench",
        "🔨": "hammer",
        "🚧": "construction",
        "🎯": "target",
        "💯": "hundred",
        "💻": "laptop",
        "📱": "phone",
        "📝": "memo",
        "📚": "books",
        "📷": "camera",
        "🎵": "music",
        "🏠": "home",
        "🌍": "earth",
        "🌙": "moon",
        "☀": "sun",
        "☕": "coffee",
        "🍕": "pizza",
        "🍺": "beer",
        "🤖": "robot",
        "👻": "ghost",
        "💀": "skull",
        "🐍": "snake",
        "🐱": "cat",
        "🐶": "dog",
        "🦄": "unicorn",
        "😀": "grinning",
        "😂": "joy",
        "😊": "blush",
        "😍": "heart eyes",
        "😎": "cool",
        "😢": "sad",
        "😡": "angry",
        "🙂": "smile",
        "🤔": "thinking",
        "👍": "thumbs up",
        "👎": "thumbs down",
        "👋": "wave",
        "👏": "clap",
        "🙏": "pray",
        "💪": "muscle",
        "👀": "eyes",
        "🏳🌈": "rainbow flag",
        "🌈": "rainbow",
    }
)

# Approximation of the Extended_Pictographic property from the Unicode emoji
# data files, limited to the blocks that hold pictographs.
PICTOGRAPHIC_PATTERN = re.compile(
    "["
    "©®‼⁉™ℹ"
    "↔-↙↩↪⌚⌛⌨⎈⏏"
    "⏩-⏳⏸-⏺Ⓜ▪▫▶◀"
    "◻-◾☀-★☇-☒☔-⚅"
    "⚐-✅✈-✒✔✖✝✡✨"
    "✳✴❄❇❌❎❓-❕❗"
    "❣-❧➕-➗➡➰➿⤴⤵"
    "⬅-⬇⬛⬜⭐⭕〰〽㊗㊙"
    "\U0001f000-\U0001f0ff\U0001f10d-\U0001f10f\U0001f12f"
    "\U0001f16c-\U0001f171\U0001f17e\U0001f17f\U0001f18e"
    "\U0001f191-\U0001f19a\U0001f1ad-\U0001f1ff"
    "\U0001f201-\U0001f20f\U0001f21a\U0001f22f\U0001f232-\U0001f23a"
    "\U0001f23c-\U0001f23f\U0001f249-\U0001f3fa\U0001f400-\U0001f53d"
    "\U0001f546-\U0001f64f\U0001f680-\U0001f6ff\U0001f774-\U0001f77f"
    "\U0001f7d5-\U0001f7ff\U0001f80c-\U0001f80f\U0001f848-\U0001f84f"
    "\U0001f85a-\U0001f85f\U0001f888-\U0001f88f\U0001f8ae-\U0001f8ff"
    "\U0001f90c-\U0001f93a\U0001f93c-\U0001f945\U0001f947-\U0001faff"
    "\U0001fc00-\U0001fffd"
    "]+"
)

STOPWORDS_EN: frozenset[str] = frozenset(
    {
        "a",
        "about",
        "above",
        "after",
        "again",
        "against",
        "all",
        "am",
        "an",
        "and",
        "any",
        "are",
        "as",
        "at",
        "be",
        "because",
        "been",
        "before",
        "being",
        "below",
        "between",
        "both",
        "but",
        "by",
        "can",
        "did",
        "do",
        "does",
        "doing",
        "down",
        "during",
        "each",
        "few",
        "for",
        "from",
        "further",
        "had",
        "has",
        "have",
        "having",
        "he",
        "her",
        "here",
        "hers",
        "him",
        "his",
        "how",
        "i",
        "if",
        "in",
        "into",
        "is",
        "it",
        "its",
        "itself",
        "just",
        "me",
        "more",
        "most",
        "my",
        "no",
        "nor",
        "not",
        "of",
        "off",
        "on",
        "once",
        "only",
        "or",
        "other",
        "our",
        "ours",
        "out",
        "over",
        "own",
        "same",
        "she",
        "should",
        "so",
        "some",
        "such",
        "than",
        "that",
        "the",
        "their",
        "theirs",
        "them",
        "then",
        "there",
        "these",
        "they",
        "this",
        "those",
        "through",
        "to",
        "too",
        "under",
        "until",
        "up",
        "very",
        "was",
        "we",
        "were",
        "what",
        "when",
        "where",
        "which",
        "while",
        "who",
        "whom",
        "why",
        "will",
        "with",
        "you",
        "your",
        "yours",
    }
)

RESERVED_DEFAULT: frozenset[str] = frozenset(
    {".", "..", "con", "prn", "aux", "nul"}
    | {f"com{index}" for index in range(1, 10)}
    | {f"lpt{index}" for index in range(1, 10)}
)


def _longest_first(table: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    return tuple(sorted(table.items(), key=lambda item: (-len(item[0]), item[0])))


_SYMBOLS_ORDERED: Mapping[str, tuple[tuple[str, str], ...]] = MappingProxyType(
    {
        "basic": _longest_first(SYMBOLS_BASIC),
        "extended": _longest_first(SYMBOLS_EXTENDED),
    }
)
_EMOJI_ORDERED = _longest_first(EMOJI_NAMES)
_TRANSLITERATION_TABLES = (LATIN_SPECIAL_MAP, GREEK_MAP, CYRILLIC_MAP)


def symbol_table(policy: str) -> tuple[tuple[str, str], ...]:
    """Return ``(symbol, word)`` pairs for ``policy``, longest symbol first."""

    return _SYMBOLS_ORDERED[policy]


def emoji_names() -> tuple[tuple[str, str], ...]:
    """Return ``(emoji, name)`` pairs, longest sequence first."""

    return _EMOJI_ORDERED


def transliterate_char(char: str) -> str | None:
    """Look ``char`` up in the Latin-special, Greek, then Cyrillic maps."""

    lowered = char.lower()
    for table in _TRANSLITERATION_TABLES:
        mapped = table.get(lowered)
        if mapped is not None:
            return mapped
    return None


def is_reserved(candidate: str, extra: frozenset[str] = frozenset()) -> bool:
    """Return whether ``candidate`` collides with a reserved name (case-insensitive)."""

    folded = candidate.casefold()
    return folded in RESERVED_DEFAULT or folded in extra
