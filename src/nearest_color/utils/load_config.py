# src/nearest_color/utils/load_config.py

"""Load JSON palette files from a <data/> directory with caching.

Returns the parsed JSON as-is (object or array). Results are cached per path and
mtime, so edited files are picked up on the next load.

Used by the palette loader and tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

_DATA_DIR_ENV_VARS = ("NEAREST_COLOR_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested palette file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a palette file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in _DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Any:
    """Load <data>/<file>.json, parse it, and cache the result."""
    # Resolve base directory: explicit > env override > discovery
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = Path(base_dir).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)

    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)

    return data
