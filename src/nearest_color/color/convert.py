"""
convert.py
==========

Does: Format RGB triples as hex strings and convert rgba() strings to a (lossy)
      short hex form.
Used By: Palette builder (source strings for raw triples), public API.
Returns: Hex strings. Neither function raises on odd input.
"""

from __future__ import annotations

import re
from typing import Optional

from nearest_color.types import RGB

__all__ = ["rgb_to_hex", "rgba_to_hex_lossy"]
__docformat__ = "google"

# Leading integer of a component, after optional whitespace
_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]+)")


def rgb_to_hex(rgb: RGB) -> str:
    """Does: RGB -> '#rrggbb' (lowercase). Out-of-range channels are not clamped.

    Example:
        >>> rgb_to_hex(RGB(255, 128, 0))
        '#ff8000'
    """
    return "#" + "".join(f"{int(c):02x}" for c in rgb)


def _leading_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    m = _INT_PREFIX_RE.match(text)
    return int(m.group(1)) if m else None


def _single_hex(value: Optional[int]) -> str:
    return "NaN" if value is None else format(value, "x")


def rgba_to_hex_lossy(rgba: str) -> str:
    """Convert 'rgba(R, G, B, A)' to '#' + hex(R) + hex(G) + hex(B).

    Alpha is discarded and each channel is written as plain base-16 without
    padding, so only channels below 16 give a well-formed '#rgb' string.
    Components that cannot be read come out as 'NaN'.

    Example:
        >>> rgba_to_hex_lossy("rgba(1,1,1,1)")
        '#111'
        >>> rgba_to_hex_lossy("rgba(255, 0, 16, 0.5)")
        '#ff010'
    """
    start = rgba.find("(")
    parts = rgba[max(start, 0):].split(",")
    parts += [None] * (3 - len(parts))

    r = _leading_int(parts[0][1:])
    g = _leading_int(parts[1])
    b = _leading_int(parts[2])
    return "#" + _single_hex(r) + _single_hex(g) + _single_hex(b)
