"""
color.
=====

Does: Aggregate the color normalizer, the standard color table and hex conversions.
Used By: Palette builder, nearest-match engine, public API.
Returns: Pure functions and constants; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import STANDARD_COLORS

# ── Conversions ──────────────────────────────────────────────────────────────
from .convert import rgb_to_hex, rgba_to_hex_lossy

# ── Normalizer ───────────────────────────────────────────────────────────────
from .normalize import InvalidColorError, parse_color, require_color

__all__ = [
    # constants
    "STANDARD_COLORS",
    # conversions
    "rgb_to_hex",
    "rgba_to_hex_lossy",
    # normalizer
    "InvalidColorError",
    "parse_color",
    "require_color",
]

__docformat__ = "google"
