"""
matcher.py
==========

Does: Bind a palette once and hand back a reusable query function.
Used By: Public API (build_matcher / matcher_from_file).
Returns: ``matcher(query, count=1)`` with the bound palette on ``matcher.palette``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from nearest_color.color.constants import (
    DEFAULT_NAME_FIELD,
    DEFAULT_VALUE_FIELD,
    STANDARD_COLORS,
)
from nearest_color.color.normalize import ColorInput
from nearest_color.matching.nearest import NearestResult, find_nearest
from nearest_color.palette.builder import ColorsInput, build_palette
from nearest_color.palette.loader import load_palette
from nearest_color.types import Palette

__all__ = ["Matcher", "build_matcher", "matcher_from_file"]
__docformat__ = "google"


@runtime_checkable
class Matcher(Protocol):
    palette: Palette

    def __call__(self, query: ColorInput, count: int = 1) -> NearestResult: ...


class _BoundMatcher:
    """Query function bound to one prebuilt palette."""

    __slots__ = ("palette",)

    def __init__(self, palette: Palette):
        self.palette = palette

    def __call__(self, query: ColorInput, count: int = 1) -> NearestResult:
        return find_nearest(query, self.palette, count)

    def __repr__(self) -> str:
        return f"<matcher over {len(self.palette)} colors>"


def build_matcher(
    colors: Optional[ColorsInput] = None,
    name_field: str = DEFAULT_NAME_FIELD,
    value_field: str = DEFAULT_VALUE_FIELD,
) -> Matcher:
    """Build the palette once and return a query function bound to it.

    Args:
        colors: Name->color mapping or records (see build_palette). Defaults to
            the standard color table.
        name_field: Record field with the display name.
        value_field: Record field with the color.

    Example:
        >>> match = build_matcher({"maroon": "#800", "pale blue": "#def"})
        >>> match("#f00").name
        'maroon'
    """
    palette = build_palette(STANDARD_COLORS if colors is None else colors, name_field, value_field)
    return _BoundMatcher(palette)


def matcher_from_file(
    file: str | os.PathLike[str],
    name_field: str = DEFAULT_NAME_FIELD,
    value_field: str = DEFAULT_VALUE_FIELD,
    *,
    base_dir: Path | None = None,
) -> Matcher:
    """Does: Like build_matcher(), with the palette read from <data>/<file>.json."""
    return _BoundMatcher(load_palette(file, name_field, value_field, base_dir=base_dir))
