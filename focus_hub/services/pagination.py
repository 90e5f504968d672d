"""
Page arithmetic for listings.

Flat listings paginate items; grouped listings paginate day buckets. Either
way the engine only sees a count and a sequence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5

# Upper bounds keep ``offset`` and ``limit`` inside a signed 64-bit INTEGER.
MAX_LIMIT = 100
MAX_PAGE = 1_000_000_000


def _positive_int(raw: Any, default: int, maximum: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if value <= 0:
        return default
    return min(value, maximum)


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        page: Optional[Any],
        limit: Optional[Any],
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_LIMIT,
    ) -> PageRequest:
        """
        Absent, non-integer or non-positive values fall back to the defaults.
        Values above ``MAX_PAGE``/``MAX_LIMIT`` are clamped to them.
        """
        return cls(
            page=_positive_int(page, default_page, MAX_PAGE),
            limit=_positive_int(limit, default_limit, MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total_count: int) -> int:
        return math.ceil(total_count / self.limit) if total_count > 0 else 0

    def slice(self, items: Sequence[T]) -> list[T]:
        """The part of an already-ordered sequence that falls on this page."""
        return list(items[self.offset:self.offset + self.limit])
