# tests/conftest.py
from __future__ import annotations

import pytest

from nearest_color.utils import clear_config_cache, reload_topics

# Palette data shared by the matching tests (Appleton natural-dye yarns)
CUSTOM_COLORS = [
    {
        "appletonColourCode": "Bright Yellow 3/4",
        "naturalDye": "Weld",
        "mordent": "Alum",
        "Yarn": "White wool",
        "colourProduced": "Strong",
        "regiaCode": "R001",
        "colourSection": "Yellow",
        "hexCode": "#F7EB34",
        "rank": "low",
    },
    {
        "appletonColourCode": "Heraldic Gold 4",
        "naturalDye": "Weld",
        "mordent": "Alum",
        "Yarn": "White wool",
        "colourProduced": "Dark",
        "regiaCode": "R002",
        "colourSection": "Yellow",
        "hexCode": "#D1BD3D",
        "rank": "middle",
    },
    {
        "appletonColourCode": "Honeysuckle Yellow 2",
        "naturalDye": "Bearberry leaves",
        "mordent": "Iron, oak galls",
        "Yarn": "White wool",
        "colourProduced": "Apricot beige",
        "regiaCode": "R003",
        "colourSection": "Yellow",
        "hexCode": "#D1C189",
        "rank": "middle",
    },
]


@pytest.fixture
def custom_colors():
    return [dict(c) for c in CUSTOM_COLORS]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Drop data-dir / debug env overrides and reset module caches around each test."""
    for var in ("NEAREST_COLOR_DATA_DIR", "DATA_DIR", "NEAREST_COLOR_DEBUG_TOPICS"):
        monkeypatch.delenv(var, raising=False)
    reload_topics()
    clear_config_cache()
    yield
    monkeypatch.delenv("NEAREST_COLOR_DEBUG_TOPICS", raising=False)
    reload_topics()
    clear_config_cache()
