from __future__ import annotations

import locale
from typing import Iterable

from .models import Part, SortSpec


def text_sort_key(value: str) -> tuple[str, str]:
    """Collate case-insensitively; names differing only in case put lowercase first."""
    folded = value.casefold()
    try:
        collated = locale.strxfrm(folded)
    except (ValueError, OSError):
        collated = folded
    return (collated, value.swapcase())


def part_sort_key(part: Part, key: str) -> tuple:
    value = getattr(part, key)
    if isinstance(value, str):
        return text_sort_key(value)
    return (value,)


def sort_parts(parts: Iterable[Part], sort: SortSpec) -> list[Part]:
    """Return ``parts`` in display order without touching the input.

    Equal keys keep their insertion order in both directions: ``sorted`` is
    stable and ``reverse=True`` preserves that stability.
    """
    items = list(parts)
    if sort.key is None:
        return items
    key = sort.key
    return sorted(items, key=lambda part: part_sort_key(part, key), reverse=sort.direction == "desc")
