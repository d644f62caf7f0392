"""Page arithmetic shared by store-level and in-memory pagination."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Half-open ``[offset, offset + size)`` slice of a result sequence."""

    offset: int
    size: int

    @property
    def stop(self) -> int:
        return self.offset + self.size

    @property
    def is_empty(self) -> bool:
        return self.size <= 0


def page_window(page: int, limit: int) -> PageWindow:
    """Window for a 1-based page. ``page < 1`` or ``limit <= 0`` select nothing."""

    if page < 1 or limit <= 0:
        return PageWindow(offset=0, size=0)
    return PageWindow(offset=(page - 1) * limit, size=limit)


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], int]:
    """Return the requested page and the total number of items before slicing."""

    window = page_window(page, limit)
    if window.is_empty:
        return [], len(items)
    return list(items[window.offset : window.stop]), len(items)
