# nearest_color/utils/__init__.py
"""

Does: Provide palette-file loading and lightweight debug logging utilities.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Palette loader, matcher factory, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
