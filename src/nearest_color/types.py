# nearest_color/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

"""
types.py.

Does: Define the immutable value objects shared by the normalizer, palette builder
      and nearest-match engine.
Returns: RGB, ColorSpec, MatchResult and the Palette alias.
"""


class RGB(NamedTuple):
    """Canonical red/green/blue triple. Channels are not clamped or validated."""

    r: int
    g: int
    b: int

    def to_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class ColorSpec:
    """One palette entry: optional display name, source string, canonical RGB."""

    source: str
    rgb: RGB
    name: str | None = None

    @property
    def label(self) -> str:
        """Display label: the name when present, otherwise the source string."""
        return self.name if self.name else self.source


@dataclass(frozen=True)
class MatchResult:
    """One ranked search result."""

    name: str
    value: str
    rgb: RGB
    distance: float

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "value": self.value,
            "rgb": self.rgb.to_dict(),
            "distance": self.distance,
        }


Palette = tuple[ColorSpec, ...]

__all__ = ["RGB", "ColorSpec", "MatchResult", "Palette"]

__docformat__ = "google"
