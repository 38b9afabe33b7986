"""
normalize.py
============

Does: Convert any supported color input (RGB triple, standard color name, 3/6-digit
      hex string, functional rgb() string) into a canonical RGB triple.
Used By: Palette builder (lenient, drops failures) and the nearest-match engine
         (strict, raises InvalidColorError).
Returns: RGB or None from parse_color(); RGB or an exception from require_color().
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

import webcolors

from nearest_color.color.constants import HEX_COLOR_RE, RGB_FUNCTION_RE, STANDARD_COLORS
from nearest_color.types import RGB

# Public surface
__all__ = [
    "ColorInput",
    "InvalidColorError",
    "parse_color",
    "require_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
ColorInput = Any  # RGB | Mapping[str, int] | Sequence[int] | str


class InvalidColorError(ValueError):
    """Raise when a query color cannot be normalized."""

    def __init__(self, color: object):
        super().__init__(f"Invalid color: {color!r}")
        self.color = color


# =============================================================================
# 1) TRIPLES
# =============================================================================

def _coerce_triple(source: object) -> Optional[RGB]:
    """Does: Accept an RGB, an {'r','g','b'} mapping or a 3-item numeric sequence."""
    if isinstance(source, RGB):
        return source
    if isinstance(source, Mapping):
        if not all(k in source for k in ("r", "g", "b")):
            return None
        channels = (source["r"], source["g"], source["b"])
    elif isinstance(source, (tuple, list)) and len(source) == 3:
        channels = tuple(source)
    else:
        return None
    if all(isinstance(c, Real) for c in channels):
        return RGB(*channels)
    return None


# =============================================================================
# 2) STRINGS
# =============================================================================

def _parse_hex(text: str) -> Optional[RGB]:
    """Does: Parse '#rgb' / '#rrggbb' (case-insensitive); other lengths fail."""
    if HEX_COLOR_RE.fullmatch(text) is None:
        return None
    return RGB(*webcolors.hex_to_rgb(text))


def _parse_component(text: str) -> int:
    """Does: '100' -> 100, '50%' -> 128 (percent scaled to 255, halves round up)."""
    if text.endswith("%"):
        return math.floor(int(text[:-1]) * 255 / 100 + 0.5)
    return int(text)


def _parse_rgb_function(text: str) -> Optional[RGB]:
    """Does: Parse 'rgb(3, 10, 100)' or 'rgb(50%, 0%, 50%)'."""
    m = RGB_FUNCTION_RE.fullmatch(text)
    if m is None:
        return None
    return RGB(*(_parse_component(part) for part in m.groups()))


# =============================================================================
# 3) PUBLIC API
# =============================================================================

def parse_color(source: ColorInput) -> Optional[RGB]:
    """Normalize a color to an RGB triple, or return None when nothing matches.

    Rules are tried in order: raw triple, standard color name, hex string,
    functional rgb() string.

    Example:
        >>> parse_color("#f80")
        RGB(r=255, g=136, b=0)
        >>> parse_color("rgb(50%, 0%, 50%)")
        RGB(r=128, g=0, b=128)
        >>> parse_color("aqua")
        RGB(r=0, g=255, b=255)
        >>> parse_color("foo") is None
        True
    """
    rgb = _coerce_triple(source)
    if rgb is not None:
        return rgb
    if not isinstance(source, str):
        return None

    named_hex = STANDARD_COLORS.get(source)
    if named_hex is not None:
        return _parse_hex(named_hex)

    rgb = _parse_hex(source)
    if rgb is None:
        rgb = _parse_rgb_function(source)
    return rgb


def require_color(source: ColorInput) -> RGB:
    """Does: Normalize like parse_color() but raise InvalidColorError on failure."""
    rgb = parse_color(source)
    if rgb is None:
        logger.debug("Rejected query color %r", source)
        raise InvalidColorError(source)
    return rgb
