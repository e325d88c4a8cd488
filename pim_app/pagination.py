from __future__ import annotations

import math
from typing import Sequence, TypeVar


T = TypeVar("T")

MAX_VISIBLE_PAGES = 3


def validate_page_size(page_size: int) -> int:
    size = int(page_size)
    if size < 1:
        raise ValueError(f"Page size must be a positive integer, got {page_size!r}")
    return size


def total_pages(item_count: int, page_size: int) -> int:
    size = validate_page_size(page_size)
    return max(1, math.ceil(max(0, int(item_count)) / size))


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(int(page), max(1, int(pages))))


def page_slice(items: Sequence[T], current_page: int, page_size: int) -> list[T]:
    size = validate_page_size(page_size)
    start = (max(1, int(current_page)) - 1) * size
    return list(items[start : start + size])


def page_numbers(current_page: int, pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> list[int]:
    if pages <= max_visible:
        return list(range(1, pages + 1))
    start = max(1, current_page - 2)
    end = min(pages, start + max_visible - 1)
    return list(range(start, end + 1))


def page_range(item_count: int, current_page: int, page_size: int) -> tuple[int, int]:
    """1-based inclusive bounds of the visible rows, ``(0, 0)`` when empty."""
    size = validate_page_size(page_size)
    if item_count <= 0:
        return (0, 0)
    start = (max(1, int(current_page)) - 1) * size
    if start >= item_count:
        return (0, 0)
    return (start + 1, min(start + size, item_count))
