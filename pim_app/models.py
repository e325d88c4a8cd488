from __future__ import annotations

from dataclasses import dataclass


SORT_KEYS = ("name", "quantity", "price")
SORT_DIRECTIONS = ("asc", "desc")
PAGE_SIZE_OPTIONS = (5, 10, 20, 50)
DEFAULT_PAGE_SIZE = 5
SORT_OPTIONS = (
    "",
    "name-asc",
    "name-desc",
    "price-asc",
    "price-desc",
    "quantity-asc",
    "quantity-desc",
)


@dataclass(frozen=True)
class PartPayload:
    name: str
    quantity: int
    price: float


@dataclass(frozen=True)
class Part:
    id: str
    name: str
    quantity: int
    price: float

    @property
    def total_value(self) -> float:
        return self.quantity * self.price

    @classmethod
    def from_payload(cls, part_id: str, payload: PartPayload) -> Part:
        return cls(id=part_id, name=payload.name, quantity=payload.quantity, price=payload.price)

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name, "quantity": self.quantity, "price": self.price}


@dataclass(frozen=True)
class SortSpec:
    key: str | None = None
    direction: str = "asc"

    def __post_init__(self) -> None:
        if self.key is not None and self.key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.key}")
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction: {self.direction}")

    def to_option(self) -> str:
        if self.key is None:
            return ""
        return f"{self.key}-{self.direction}"


def parse_sort_option(value: str | None) -> SortSpec:
    text = str(value or "").strip().lower()
    if not text or "-" not in text:
        return SortSpec()
    key, direction = text.split("-", 1)
    if key not in SORT_KEYS or direction not in SORT_DIRECTIONS:
        return SortSpec()
    return SortSpec(key=key, direction=direction)


def part_from_dict(raw: object) -> Part | None:
    """Build a Part from decoded JSON, or ``None`` if the record is unusable.

    Booleans are rejected even though they are ints in Python, and quantity
    must be integral. Negative quantity or price disqualifies the record, as
    does an integer too large to represent as a float.
    """
    if not isinstance(raw, dict):
        return None
    part_id = raw.get("id")
    name = raw.get("name")
    quantity = raw.get("quantity")
    price = raw.get("price")
    if not isinstance(part_id, str) or not isinstance(name, str):
        return None
    if not _is_number(quantity) or not _is_number(price):
        return None
    if quantity < 0 or price < 0:
        return None
    try:
        if not float(quantity).is_integer():
            return None
        price_value = float(price)
    except OverflowError:
        return None
    return Part(id=part_id, name=name, quantity=int(quantity), price=price_value)


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == value and value not in (float("inf"), float("-inf"))
