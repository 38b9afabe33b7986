"""
nearest_color
=============

Does: Resolve a color (hex, rgb() string, standard name or RGB triple) to the
      closest entries of a caller-supplied palette by Euclidean RGB distance.
Returns: build_matcher() query functions, MatchResult values and color helpers.

Quick start:
  from nearest_color import build_matcher
  match = build_matcher({"yellow": "#ff0", "navy": "#000080"})
  match("#ff1").name          # 'yellow'
  match("#ff1", count=2)      # two results, best first
"""

__version__ = "0.1.0"

from .types import RGB, ColorSpec, MatchResult, Palette
from .color import (
    STANDARD_COLORS,
    InvalidColorError,
    parse_color,
    require_color,
    rgb_to_hex,
    rgba_to_hex_lossy,
)
from .palette import build_palette, create_color_spec, load_palette
from .matching import (
    Matcher,
    build_matcher,
    euclidean_distance,
    find_nearest,
    matcher_from_file,
    rank_matches,
)

__all__ = [
    "__version__",
    # types
    "RGB",
    "ColorSpec",
    "MatchResult",
    "Palette",
    # color
    "STANDARD_COLORS",
    "InvalidColorError",
    "parse_color",
    "require_color",
    "rgb_to_hex",
    "rgba_to_hex_lossy",
    # palette
    "build_palette",
    "create_color_spec",
    "load_palette",
    # matching
    "Matcher",
    "build_matcher",
    "euclidean_distance",
    "find_nearest",
    "matcher_from_file",
    "rank_matches",
]

__docformat__ = "google"
