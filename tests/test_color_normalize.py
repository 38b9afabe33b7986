# tests/test_color_normalize.py

from __future__ import annotations

import importlib

import pytest
import webcolors

"""
normalize tests
===============

Does: Validate the priority-ordered color normalizer (triples, standard names,
      hex, functional rgb()) and the strict query parser.
"""

nz = importlib.import_module("nearest_color.color.normalize")
from nearest_color.color.convert import rgb_to_hex  # noqa: E402
from nearest_color.types import RGB  # noqa: E402


# ──────────────────────────────────────────────────────────────────────────────
# Hex strings
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "short, full",
    [("#f80", "#ff8800"), ("#FF0", "#ffff00"), ("#000", "#000000"), ("#aBc", "#AABBCC")],
)
def test_short_and_long_hex_agree(short, full):
    assert nz.parse_color(short) == nz.parse_color(full)


def test_hex_channels():
    assert nz.parse_color("#04fbc8") == RGB(4, 251, 200)
    assert nz.parse_color("#f00") == RGB(255, 0, 0)


@pytest.mark.parametrize(
    "text", ["#ff00", "#fff00", "#fffff00", "#ffff0000", "ff0", " #ff0", "#ff0 ", "#ggg", "#"]
)
def test_hex_rejects_other_shapes(text):
    assert nz.parse_color(text) is None


@pytest.mark.parametrize("rgb", [RGB(0, 0, 0), RGB(255, 255, 255), RGB(18, 52, 86), RGB(9, 200, 15)])
def test_hex_of_triple_parses_back(rgb):
    assert nz.parse_color(rgb_to_hex(rgb)) == rgb


# ──────────────────────────────────────────────────────────────────────────────
# Functional rgb()
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_function_integers():
    assert nz.parse_color("rgb(3, 10, 100)") == RGB(3, 10, 100)
    assert nz.parse_color("rgb(3,10,100)") == RGB(3, 10, 100)
    assert nz.parse_color("RGB( 1,  2,3 )") == RGB(1, 2, 3)


def test_rgb_function_percent_rounds_half_up():
    assert nz.parse_color("rgb(50%, 0%, 50%)") == RGB(128, 0, 128)
    assert nz.parse_color("rgb(100%, 30%, 10%)") == RGB(255, 77, 26)


def test_rgb_function_mixed_components():
    assert nz.parse_color("rgb(100%, 7, 0%)") == RGB(255, 7, 0)


def test_rgb_function_out_of_range_is_kept():
    assert nz.parse_color("rgb(300, 0, 999)") == RGB(300, 0, 999)


@pytest.mark.parametrize(
    "text",
    [
        "rgb(1 ,2,3)",        # whitespace before a comma
        "rgb(1,2)",
        "rgb(1,2,3,4)",
        "rgb(1000,0,0)",
        "rgb(-1,0,0)",
        "rgb(1.5,0,0)",
        "rgba(1,2,3)",
        "rgb(1,2,3) ",
    ],
)
def test_rgb_function_rejects(text):
    assert nz.parse_color(text) is None


# ──────────────────────────────────────────────────────────────────────────────
# Standard names
# ──────────────────────────────────────────────────────────────────────────────
def test_named_colors():
    assert nz.parse_color("aqua") == RGB(0, 255, 255)
    assert nz.parse_color("orange") == RGB(255, 165, 0)
    assert nz.parse_color("gray") == RGB(128, 128, 128)


def test_named_colors_are_case_sensitive_and_closed():
    assert nz.parse_color("Aqua") is None
    assert nz.parse_color("foo") is None
    assert nz.parse_color("rebeccapurple") is None


# ──────────────────────────────────────────────────────────────────────────────
# Raw triples
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_passthrough_is_identity():
    rgb = RGB(3, 22, 111)
    assert nz.parse_color(rgb) is rgb
    assert nz.parse_color(nz.parse_color(rgb)) == rgb


def test_mapping_and_sequence_triples():
    assert nz.parse_color({"r": 3, "g": 22, "b": 111}) == RGB(3, 22, 111)
    assert nz.parse_color((1, 2, 3)) == RGB(1, 2, 3)
    assert nz.parse_color([1, 2, 3]) == RGB(1, 2, 3)
    assert nz.parse_color(webcolors.IntegerRGB(10, 20, 30)) == RGB(10, 20, 30)


def test_triples_are_not_clamped():
    assert nz.parse_color({"r": -5, "g": 256, "b": 0}) == RGB(-5, 256, 0)


@pytest.mark.parametrize("value", [None, 42, {"r": 1, "g": 2}, (1, 2), ("a", "b", "c"), b"#fff"])
def test_unsupported_inputs(value):
    assert nz.parse_color(value) is None


@pytest.mark.parametrize(
    "value", [{"r": "a", "g": 1, "b": 2}, {"r": 1, "g": None, "b": 2}, {"r": 1, "g": 2, "b": [3]}]
)
def test_mapping_triples_need_numeric_channels(value):
    assert nz.parse_color(value) is None
    with pytest.raises(nz.InvalidColorError):
        nz.require_color(value)


# ──────────────────────────────────────────────────────────────────────────────
# Strict parse
# ──────────────────────────────────────────────────────────────────────────────
def test_require_color_ok():
    assert nz.require_color("#ff0") == RGB(255, 255, 0)


def test_require_color_raises_with_offending_value():
    with pytest.raises(nz.InvalidColorError) as exc:
        nz.require_color("not a color")
    assert exc.value.color == "not a color"
    assert isinstance(exc.value, ValueError)
