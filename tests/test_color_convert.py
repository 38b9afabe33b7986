# tests/test_color_convert.py
"""Tests for hex formatting and the lossy rgba() -> hex conversion."""

from __future__ import annotations

import pytest

from nearest_color.color import rgb_to_hex, rgba_to_hex_lossy
from nearest_color.types import RGB


# ---------- rgb_to_hex ----------
def test_rgb_to_hex_pads_and_lowercases():
    assert rgb_to_hex(RGB(255, 128, 0)) == "#ff8000"
    assert rgb_to_hex(RGB(1, 2, 3)) == "#010203"
    assert rgb_to_hex(RGB(255, 255, 51)) == "#ffff33"


# ---------- rgba_to_hex_lossy ----------
@pytest.mark.parametrize(
    "rgba, expected",
    [
        ("rgba(1,1,1,1)", "#111"),
        ("rgba( 10 , 11 ,12 , 0.25)", "#abc"),
        ("rgba(0, 0, 0, 0)", "#000"),
    ],
)
def test_rgba_to_hex_lossy_single_digit_channels(rgba, expected):
    assert rgba_to_hex_lossy(rgba) == expected


def test_rgba_to_hex_lossy_overflows_past_fifteen():
    # each channel is written unpadded, so 0/16 shrink the result
    assert rgba_to_hex_lossy("rgba(255, 0, 16, 0.5)") == "#ff010"


def test_rgba_to_hex_lossy_ignores_alpha():
    assert rgba_to_hex_lossy("rgba(1,2,3,0.1)") == rgba_to_hex_lossy("rgba(1,2,3,1)")


def test_rgba_to_hex_lossy_never_raises_on_garbage():
    assert rgba_to_hex_lossy("rgba(x, 1, 2, 1)") == "#NaN12"
    assert rgba_to_hex_lossy("rgba(1)") == "#1NaNNaN"
    assert "NaN" in rgba_to_hex_lossy("")
