"""Tests for sanitization helpers."""
from __future__ import annotations

import pytest

from slugline.sanitize import collapse_separators, neutralize_slashes, sanitize_strict, truncate_at_boundary


def test_sanitize_strict_ascii_keeps_only_alnum_and_separator() -> None:
    assert sanitize_strict("h\u00e9llo-w\u00f6rld!", "-", "ascii") == "hllo-wrld"
    assert sanitize_strict("a_b-c.d", "_", "ascii") == "a_bcd"


def test_sanitize_strict_unicode_keeps_letters_numbers_and_attached_marks() -> None:
    assert sanitize_strict("cafe\u0301-2024!", "-", "unicode") == "cafe\u0301-2024"
    assert sanitize_strict("a-\u0301b", "-", "unicode") == "a-b"
    assert sanitize_strict("a!\u0301b", "-", "unicode") == "ab"
    assert sanitize_strict("你好-世界", "-", "unicode") == "你好-世界"


@pytest.mark.parametrize(
    ("slug", "separator", "expected"),
    [
        ("--a--b--", "-", "a-b"),
        ("..a...b..", ".", "a.b"),
        ("__a__", "_", "a"),
        ("", "-", ""),
        ("a-b", "_", "a-b"),
    ],
)
def test_collapse_separators(slug: str, separator: str, expected: str) -> None:
    assert collapse_separators(slug, separator) == expected


def test_neutralize_slashes() -> None:
    assert neutralize_slashes("a/b\\c//d", "_") == "a_b_c_d"


def test_truncate_at_boundary() -> None:
    assert truncate_at_boundary("hello-wonderful-world", "-", 12) == "hello"
    assert truncate_at_boundary("hello-wonderful-world", "-", 15) == "hello-wonderful"
    assert truncate_at_boundary("hello-wonderful-world", "-", 16) == "hello-wonderful"
    assert truncate_at_boundary("abcdefghij", "-", 4) == "abcd"
    assert truncate_at_boundary("short", "-", 10) == "short"
    assert truncate_at_boundary("a.b.c", ".", 4) == "a.b"


def test_truncate_at_boundary_keeps_cut_ending_before_separator() -> None:
    assert truncate_at_boundary("ab-cd-ef", "-", 5) == "ab-cd"
