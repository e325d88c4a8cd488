"""Inventory view state and the pure transitions that act on it.

Every intent from the view is a function ``(state, ...) -> state``. The
functions never mutate their input, so the same invariants hold after every
transition:

* ``1 <= current_page <= total_pages(len(parts), page_size)``
* ``selected`` only contains ids present in ``parts``
* ``selected`` is empty whenever ``select_mode`` is off
* ``delete_pending`` implies a non-empty selection
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .models import DEFAULT_PAGE_SIZE, Part, PartPayload, SortSpec
from .pagination import clamp_page, page_numbers, page_range, page_slice, total_pages, validate_page_size
from .sorting import sort_parts


@dataclass(frozen=True)
class InventoryState:
    parts: tuple[Part, ...] = ()
    sort: SortSpec = field(default_factory=SortSpec)
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1
    select_mode: bool = False
    selected: frozenset[str] = frozenset()
    delete_pending: bool = False

    @property
    def part_ids(self) -> frozenset[str]:
        return frozenset(part.id for part in self.parts)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.parts), self.page_size)

    @property
    def sorted_parts(self) -> list[Part]:
        return sort_parts(self.parts, self.sort)

    @property
    def visible_parts(self) -> list[Part]:
        return page_slice(self.sorted_parts, self.current_page, self.page_size)

    @property
    def page_numbers(self) -> list[int]:
        return page_numbers(self.current_page, self.total_pages)

    @property
    def page_range(self) -> tuple[int, int]:
        return page_range(len(self.parts), self.current_page, self.page_size)

    @property
    def total_value(self) -> float:
        return total_value(self.parts)


def total_value(parts: Iterable[Part]) -> float:
    return sum(part.quantity * part.price for part in parts)


def format_price(value: float) -> str:
    return f"${value:,.2f}"


def _reconcile(state: InventoryState) -> InventoryState:
    """Re-establish the cross-field invariants after the collection changed."""
    ids = state.part_ids
    selected = state.selected & ids if state.select_mode else frozenset()
    page = clamp_page(state.current_page, total_pages(len(state.parts), state.page_size))
    pending = state.delete_pending and bool(selected)
    if selected == state.selected and page == state.current_page and pending == state.delete_pending:
        return state
    return replace(state, selected=selected, current_page=page, delete_pending=pending)


def unique_parts(parts: Iterable[Part]) -> tuple[Part, ...]:
    seen: set[str] = set()
    kept: list[Part] = []
    for part in parts:
        if part.id in seen:
            continue
        seen.add(part.id)
        kept.append(part)
    return tuple(kept)


def initial_state(parts: Iterable[Part] = (), page_size: int = DEFAULT_PAGE_SIZE) -> InventoryState:
    return InventoryState(parts=unique_parts(parts), page_size=validate_page_size(page_size))


def replace_parts(state: InventoryState, parts: Iterable[Part]) -> InventoryState:
    return replace(
        state,
        parts=unique_parts(parts),
        current_page=1,
        select_mode=False,
        selected=frozenset(),
        delete_pending=False,
    )


def add_part(state: InventoryState, part_id: str, payload: PartPayload) -> InventoryState:
    if part_id in state.part_ids:
        raise ValueError(f"Duplicate part id: {part_id}")
    return replace(state, parts=state.parts + (Part.from_payload(part_id, payload),))


def delete_parts(state: InventoryState, part_ids: Iterable[str]) -> InventoryState:
    doomed = frozenset(part_ids)
    if not doomed:
        return state
    remaining = tuple(part for part in state.parts if part.id not in doomed)
    if len(remaining) == len(state.parts):
        return state
    return _reconcile(replace(state, parts=remaining))


def set_sort(state: InventoryState, sort: SortSpec) -> InventoryState:
    if sort == state.sort:
        return state
    return replace(state, sort=sort)


def set_page_size(state: InventoryState, page_size: int) -> InventoryState:
    return replace(state, page_size=validate_page_size(page_size), current_page=1)


def go_to_page(state: InventoryState, page: int) -> InventoryState:
    target = clamp_page(page, state.total_pages)
    if target == state.current_page:
        return state
    return replace(state, current_page=target)


def toggle_select_mode(state: InventoryState) -> InventoryState:
    return replace(state, select_mode=not state.select_mode, selected=frozenset(), delete_pending=False)


def toggle_selection(state: InventoryState, part_id: str) -> InventoryState:
    if not state.select_mode or part_id not in state.part_ids:
        return state
    if part_id in state.selected:
        return replace(state, selected=state.selected - {part_id})
    return replace(state, selected=state.selected | {part_id})


def request_bulk_delete(state: InventoryState) -> InventoryState:
    if not state.selected or state.delete_pending:
        return state
    return replace(state, delete_pending=True)


def confirm_bulk_delete(state: InventoryState) -> InventoryState:
    if not state.delete_pending:
        return state
    doomed = state.selected
    cleared = replace(state, selected=frozenset(), select_mode=False, delete_pending=False)
    return delete_parts(cleared, doomed)


def cancel_bulk_delete(state: InventoryState) -> InventoryState:
    if not state.delete_pending:
        return state
    return replace(state, delete_pending=False)
