"""
Time-window selection for scheduled items.

A window is always bound to one owner: there is no way to express "every
item ending after now" without also naming whose items they are. The
repositories turn a window into a SQL clause; ``next`` keeps items ending at
or after ``now`` and ``prev`` those ending strictly before it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from focus_hub.models.enums import WindowMode
from focus_hub.utils.datetime_utils import ensure_utc


@dataclass(frozen=True)
class WindowFilter:
    """Owner plus next/prev selection relative to ``now``."""

    owner: str
    mode: WindowMode
    now: datetime

    def __post_init__(self) -> None:
        if not self.owner:
            raise ValueError("WindowFilter requires an owner")
        object.__setattr__(self, "now", ensure_utc(self.now))
