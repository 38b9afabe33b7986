"""
builder.py
==========

Does: Turn a name->color mapping or an array of flat records into a Palette of
      ColorSpec entries. Entries whose color cannot be normalized are dropped.
Used By: Matcher factory, JSON palette loader.
Returns: Palette (tuple[ColorSpec, ...]), read-only once built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Tuple, Union

from nearest_color.color.constants import DEFAULT_NAME_FIELD, DEFAULT_VALUE_FIELD
from nearest_color.color.convert import rgb_to_hex
from nearest_color.color.normalize import ColorInput, parse_color
from nearest_color.types import ColorSpec, Palette
from nearest_color.utils.log import debug

__all__ = ["ColorsInput", "create_color_spec", "build_palette"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# Mapping form or record-array form
ColorsInput = Union[Mapping[str, ColorInput], Iterable[Any]]


def create_color_spec(value: ColorInput, name: Optional[Any] = None) -> Optional[ColorSpec]:
    """Build one ColorSpec, or None if the value does not normalize.

    A string value is kept verbatim as the source; a raw triple gets a
    synthesized '#rrggbb' source.

    Example:
        >>> create_color_spec("#800", "maroon")
        ColorSpec(source='#800', rgb=RGB(r=136, g=0, b=0), name='maroon')
    """
    rgb = parse_color(value)
    if rgb is None:
        return None
    source = value if isinstance(value, str) else rgb_to_hex(rgb)
    return ColorSpec(source=source, rgb=rgb, name=str(name) if name else None)


def _record_entry(record: Any, name_field: str, value_field: str) -> Tuple[Any, Any]:
    """Does: Pick (value, name) out of one record; bare strings have no name."""
    if isinstance(record, str):
        return record, None
    if isinstance(record, Mapping):
        return record.get(value_field), record.get(name_field)
    return None, None


def build_palette(
    colors: ColorsInput,
    name_field: str = DEFAULT_NAME_FIELD,
    value_field: str = DEFAULT_VALUE_FIELD,
) -> Palette:
    """Build a Palette from either accepted input shape.

    Args:
        colors: A mapping of color name to color (hex / rgb() string or raw
            triple), or a sequence of flat records.
        name_field: Record field holding the display name (record form only).
        value_field: Record field holding the color (record form only).

    Returns:
        Palette in input order, minus entries whose color failed to parse.
    """
    if isinstance(colors, Mapping):
        entries: Iterable[Tuple[Any, Any]] = ((v, k) for k, v in colors.items())
    else:
        entries = (_record_entry(rec, name_field, value_field) for rec in colors)

    specs: list[ColorSpec] = []
    dropped = 0
    for value, name in entries:
        spec = create_color_spec(value, name)
        if spec is None:
            dropped += 1
            logger.debug("Dropping palette entry %r: unparseable color %r", name, value)
            continue
        specs.append(spec)

    debug(f"built palette: {len(specs)} entries, {dropped} dropped", topic="palette")
    return tuple(specs)
