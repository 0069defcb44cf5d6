"""
log.py.

Does: Trace color conversions and combination results on stderr, per topic.
      Topics in use: "conversion" (adapter reads of caller input) and
      "combination" (rendered results of the public operations).
Returns: Nothing; output is opt-in through MOTLEY_HUE_DEBUG_TOPICS
         ("conversion,combination" or "all"). Unset means silent.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "TOPICS", "debug", "enabled", "reload_topics"]

ENV_VAR = "MOTLEY_HUE_DEBUG_TOPICS"
TOPICS = ("conversion", "combination")


def _read_env() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_ACTIVE = _read_env()


def reload_topics() -> None:
    """Does: Re-read MOTLEY_HUE_DEBUG_TOPICS (tests flip it with monkeypatch)."""
    global _ACTIVE
    _ACTIVE = _read_env()


def enabled(topic: str) -> bool:
    return "all" in _ACTIVE or topic.lower().strip() in _ACTIVE


def debug(
    msg: str,
    topic: str = "combination",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write `[time] [topic][LEVEL] msg` when `topic` is switched on."""
    if not enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(
        f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}",
        file=stream or sys.stderr,
    )
