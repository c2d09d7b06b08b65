"""Tests for the unique slug helper."""
from __future__ import annotations

import pytest

from slugline.models import SlugConfigError
from slugline.unique import unique_slug


def test_unique_slug_returns_base_when_free() -> None:
    assert unique_slug("post", lambda candidate: False) == "post"


def test_unique_slug_tries_numbered_candidates() -> None:
    taken = {"post", "post-1", "post-2"}

    assert unique_slug("post", taken.__contains__) == "post-3"
    assert unique_slug("post", {"post"}.__contains__, separator="_") == "post_1"


def test_unique_slug_uses_timestamp_when_exhausted() -> None:
    result = unique_slug("post", lambda candidate: True, max_attempts=3, clock=lambda: 1700000000.5)

    assert result == "post-1700000000500"


def test_unique_slug_candidate_order() -> None:
    seen: list[str] = []

    def is_taken(candidate: str) -> bool:
        seen.append(candidate)
        return len(seen) < 3

    assert unique_slug("a", is_taken, separator=".") == "a.2"
    assert seen == ["a", "a.1", "a.2"]


def test_unique_slug_rejects_invalid_separator() -> None:
    with pytest.raises(SlugConfigError):
        unique_slug("a", lambda candidate: True, separator="/")
