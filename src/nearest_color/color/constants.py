# constants.py
# ============

"""
constants.
=========

Does: Define the built-in standard color table and the patterns used to recognise
      hex and functional rgb() color strings.
Used By: Color normalizer, default matcher palette.
Returns: Pure data structures only (no side effects).
"""

import re
from types import MappingProxyType
from typing import Mapping

# ── 1) Standard named colors ─────────────────────────────────────────────────

# Basic CSS named colors -> hex. Lookup is exact and case-sensitive.
STANDARD_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "aqua": "#0ff",
        "black": "#000",
        "blue": "#00f",
        "fuchsia": "#f0f",
        "gray": "#808080",
        "green": "#008000",
        "lime": "#0f0",
        "maroon": "#800000",
        "navy": "#000080",
        "olive": "#808000",
        "orange": "#ffa500",
        "purple": "#800080",
        "red": "#f00",
        "silver": "#c0c0c0",
        "teal": "#008080",
        "white": "#fff",
        "yellow": "#ff0",
    }
)


# ── 2) String patterns ───────────────────────────────────────────────────────

# '#' + exactly 3 or 6 hex digits
HEX_COLOR_RE = re.compile(r"#((?:[0-9a-f]{3}){1,2})", re.IGNORECASE)

# rgb(R, G, B) where each component is 1-3 digits with an optional '%'
RGB_FUNCTION_RE = re.compile(
    r"rgb\(\s*([0-9]{1,3}%?),\s*([0-9]{1,3}%?),\s*([0-9]{1,3}%?)\s*\)",
    re.IGNORECASE,
)

# Default field names for record-array palettes
DEFAULT_NAME_FIELD = "name"
DEFAULT_VALUE_FIELD = "value"

__all__ = [
    "STANDARD_COLORS",
    "HEX_COLOR_RE",
    "RGB_FUNCTION_RE",
    "DEFAULT_NAME_FIELD",
    "DEFAULT_VALUE_FIELD",
]
