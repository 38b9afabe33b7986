"""
palette.
=======

Does: Build searchable palettes from mappings, record arrays or JSON data files.
Used By: Matcher factory, public API.
"""

from .builder import ColorsInput, build_palette, create_color_spec
from .loader import load_palette

__all__ = [
    "ColorsInput",
    "build_palette",
    "create_color_spec",
    "load_palette",
]

__docformat__ = "google"
