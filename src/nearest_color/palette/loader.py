"""
loader.py
=========

Does: Read a palette stored as JSON in the data directory and build it.
      A JSON object is taken as a name->color mapping, a JSON array as records.
Used By: matcher_from_file(), callers shipping palettes as data files.
Returns: Palette.
"""

from __future__ import annotations

import os
from pathlib import Path

from nearest_color.color.constants import DEFAULT_NAME_FIELD, DEFAULT_VALUE_FIELD
from nearest_color.palette.builder import build_palette
from nearest_color.types import Palette
from nearest_color.utils.load_config import ConfigTypeError, load_config

__all__ = ["load_palette"]
__docformat__ = "google"


def load_palette(
    file: str | os.PathLike[str],
    name_field: str = DEFAULT_NAME_FIELD,
    value_field: str = DEFAULT_VALUE_FIELD,
    *,
    base_dir: Path | None = None,
) -> Palette:
    """Does: Load <data>/<file>.json and build a Palette from its contents."""
    data = load_config(file, base_dir=base_dir)
    if not isinstance(data, (dict, list)):
        raise ConfigTypeError(
            f"{os.fspath(file)}: expected object or array palette, got {type(data).__name__}"
        )
    return build_palette(data, name_field, value_field)
