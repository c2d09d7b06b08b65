"""Tests for the stable hash helpers."""
from __future__ import annotations

import pytest

from slugline.hashing import stable_hash, to_base36


@pytest.mark.parametrize(("value", "expected"), [(0, "0"), (35, "z"), (36, "10"), (1295, "zz"), (1296, "100")])
def test_to_base36(value: int, expected: str) -> None:
    assert to_base36(value) == expected


def test_to_base36_rejects_negative_values() -> None:
    with pytest.raises(ValueError):
        to_base36(-1)


def test_stable_hash_shape_and_determinism() -> None:
    digest = stable_hash("hello")

    assert len(digest) == 6
    assert digest == stable_hash("hello")
    assert digest != stable_hash("hellp")
    assert set(digest) <= set("0123456789abcdefghijklmnopqrstuvwxyz")
    assert len(stable_hash("hello", length=10)) == 10
