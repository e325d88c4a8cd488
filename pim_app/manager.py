from __future__ import annotations

import logging
from typing import Callable, Iterable
from uuid import uuid4

from . import state as reducers
from .errors import ValidationError
from .models import DEFAULT_PAGE_SIZE, Part, PartPayload, SortSpec, parse_sort_option
from .state import InventoryState, format_price
from .validation import validate_part_fields


logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 8

Listener = Callable[[InventoryState], None]


def new_part_id() -> str:
    return uuid4().hex


class PartsCollectionManager:
    """Owns the inventory state and applies view intents to it one at a time.

    Listeners are called with the new state after every intent that changed
    something; intents that turn out to be no-ops do not notify.
    """

    def __init__(
        self,
        parts: Iterable[Part] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._state = reducers.initial_state(parts, page_size=page_size)
        self._id_factory = id_factory or new_part_id
        self._listeners: list[Listener] = []

    @property
    def state(self) -> InventoryState:
        return self._state

    @property
    def parts(self) -> tuple[Part, ...]:
        return self._state.parts

    def snapshot(self) -> tuple[Part, ...]:
        return self._state.parts

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _apply(self, new_state: InventoryState) -> bool:
        if new_state == self._state:
            return False
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return True

    def _next_id(self) -> str:
        existing = self._state.part_ids
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = str(self._id_factory())
            if candidate and candidate not in existing:
                return candidate
            logger.warning("Part id collision on %r, retrying", candidate)
        raise ValueError(f"Could not generate a unique part id after {MAX_ID_ATTEMPTS} attempts")

    def add_part(self, payload: PartPayload) -> Part:
        part_id = self._next_id()
        self._apply(reducers.add_part(self._state, part_id, payload))
        logger.info("Added part %s (%s)", part_id, payload.name)
        return self._state.parts[-1]

    def add_from_fields(self, name: object, quantity: object, price: object) -> Part:
        result = validate_part_fields(name, quantity, price)
        if result.payload is None:
            raise ValidationError(result.errors)
        return self.add_part(result.payload)

    def delete_parts(self, part_ids: Iterable[str]) -> int:
        before = len(self._state.parts)
        self._apply(reducers.delete_parts(self._state, part_ids))
        removed = before - len(self._state.parts)
        if removed:
            logger.info("Deleted %d part(s)", removed)
        return removed

    def replace_parts(self, parts: Iterable[Part]) -> None:
        self._apply(reducers.replace_parts(self._state, parts))
        logger.info("Loaded %d part(s)", len(self._state.parts))

    def set_sort(self, sort: SortSpec) -> None:
        self._apply(reducers.set_sort(self._state, sort))

    def set_sort_option(self, option: str | None) -> None:
        self.set_sort(parse_sort_option(option))

    def set_page_size(self, page_size: int) -> None:
        self._apply(reducers.set_page_size(self._state, page_size))

    def go_to_page(self, page: int) -> None:
        self._apply(reducers.go_to_page(self._state, page))

    def next_page(self) -> None:
        self.go_to_page(self._state.current_page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self._state.current_page - 1)

    def toggle_select_mode(self) -> None:
        self._apply(reducers.toggle_select_mode(self._state))

    def toggle_selection(self, part_id: str) -> None:
        self._apply(reducers.toggle_selection(self._state, part_id))

    def request_bulk_delete(self) -> bool:
        self._apply(reducers.request_bulk_delete(self._state))
        return self._state.delete_pending

    def confirm_bulk_delete(self) -> int:
        if not self._state.delete_pending:
            return 0
        before = len(self._state.parts)
        self._apply(reducers.confirm_bulk_delete(self._state))
        removed = before - len(self._state.parts)
        logger.info("Bulk deleted %d part(s)", removed)
        return removed

    def cancel_bulk_delete(self) -> None:
        self._apply(reducers.cancel_bulk_delete(self._state))

    def total_value(self) -> float:
        return self._state.total_value

    def formatted_total_value(self) -> str:
        return format_price(self._state.total_value)
