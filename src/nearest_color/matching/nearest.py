"""
nearest.py
==========

Does: Rank every palette entry by Euclidean RGB distance to a query color and
      return the best match or the top-N matches.
Used By: Matcher factory, callers holding a prebuilt Palette.
Returns: MatchResult | None for count <= 1, else list[MatchResult] (best first).

Notes:
- Linear scan + sort per query; palettes are expected to be small.
- Ties keep palette order (list.sort is stable).
"""

from __future__ import annotations

import logging
import math
from operator import attrgetter
from typing import List, Optional, Union

from nearest_color.color.normalize import ColorInput, require_color
from nearest_color.types import RGB, MatchResult, Palette
from nearest_color.utils.log import debug

__all__ = ["euclidean_distance", "rank_matches", "find_nearest"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

NearestResult = Union[Optional[MatchResult], List[MatchResult]]


def euclidean_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in RGB space (no clamping, no weights)."""
    return math.sqrt(
        (rgb1.r - rgb2.r) ** 2 + (rgb1.g - rgb2.g) ** 2 + (rgb1.b - rgb2.b) ** 2
    )


def rank_matches(target: RGB, palette: Palette) -> List[MatchResult]:
    """Does: Build one MatchResult per entry, sorted by ascending distance."""
    matches = [
        MatchResult(
            name=spec.label,
            value=spec.source,
            rgb=spec.rgb,
            distance=euclidean_distance(target, spec.rgb),
        )
        for spec in palette
    ]
    matches.sort(key=attrgetter("distance"))
    return matches


def find_nearest(query: ColorInput, palette: Palette, count: int = 1) -> NearestResult:
    """Find the palette color(s) nearest to ``query``.

    Args:
        query: Any color accepted by parse_color().
        palette: Palette to search; it is not modified.
        count: Number of results. ``<= 1`` returns a single MatchResult (None
            for an empty palette); larger values return up to ``count``
            results, best first, without padding.

    Raises:
        InvalidColorError: If ``query`` cannot be normalized.

    Example:
        >>> from nearest_color.palette import build_palette
        >>> find_nearest("#ff1", build_palette({"yellow": "#ff0"})).distance
        17.0
    """
    target = require_color(query)
    matches = rank_matches(target, palette)

    if matches:
        debug(
            f"query={query!r} rgb={tuple(target)} best={matches[0].name!r} "
            f"d={matches[0].distance:.3f} of {len(matches)}",
            topic="match",
        )
    else:
        logger.debug("Query %r against an empty palette", query)

    if count <= 1:
        return matches[0] if matches else None
    return matches[:count]
