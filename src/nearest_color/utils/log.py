"""
log.py.

Does: Lightweight debug logger controlled by NEAREST_COLOR_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level when the topic is enabled.
         Used by the palette builder, matcher and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "topic_enabled"]

_ENV_VAR = "NEAREST_COLOR_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable NEAREST_COLOR_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    """Does: Tell whether debug lines for this topic are printed."""
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "match",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via NEAREST_COLOR_DEBUG_TOPICS.
    """
    if not topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
