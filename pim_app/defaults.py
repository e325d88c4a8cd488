from __future__ import annotations

import time

from .models import Part
from .persistence import PartsRepository


INITIAL_PARTS: tuple[Part, ...] = (
    Part(id="1", name="Engine Oil Filter", quantity=50, price=12.99),
    Part(id="2", name="Brake Pads", quantity=25, price=45.50),
)


def fetch_defaults(delay_seconds: float = 0.0) -> list[Part]:
    if delay_seconds > 0:
        time.sleep(delay_seconds)
    return list(INITIAL_PARTS)


def load_initial_parts(repository: PartsRepository, delay_seconds: float = 0.0) -> list[Part]:
    saved = repository.load()
    if saved:
        return saved
    return fetch_defaults(delay_seconds)
