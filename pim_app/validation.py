from __future__ import annotations

import math
from dataclasses import dataclass, field

from .i18n import tr
from .models import PartPayload


REQUIRED = "required"
NON_NEGATIVE = "non-negative"
INTEGER = "integer"


@dataclass
class ValidationResult:
    payload: PartPayload | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.payload is not None and not self.errors


def parse_number(value: object) -> float | None:
    """Parse user input as a number, or ``None``.

    A single comma is read as the decimal separator (``"1,5"`` is 1.5, so
    ``"1,000"`` is 1.0). Input carrying more than one separator, such as
    ``"1,000.50"`` or ``"1,000,000"``, is rejected rather than guessed at.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.count(",") + text.count(".") > 1:
            return None
        text = text.replace(",", ".")
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def validate_part_fields(name: object, quantity: object, price: object) -> ValidationResult:
    errors: dict[str, str] = {}

    clean_name = str(name or "").strip()
    if not clean_name:
        errors["name"] = REQUIRED

    qty_value: float | None = None
    if not str("" if quantity is None else quantity).strip():
        errors["quantity"] = REQUIRED
    else:
        qty_value = parse_number(quantity)
        if qty_value is None or qty_value < 0:
            errors["quantity"] = NON_NEGATIVE
        elif not qty_value.is_integer():
            errors["quantity"] = INTEGER

    price_value: float | None = None
    if not str("" if price is None else price).strip():
        errors["price"] = REQUIRED
    else:
        price_value = parse_number(price)
        if price_value is None or price_value < 0:
            errors["price"] = NON_NEGATIVE

    if errors or qty_value is None or price_value is None:
        return ValidationResult(errors=errors)
    return ValidationResult(
        payload=PartPayload(name=clean_name, quantity=int(qty_value), price=float(price_value))
    )


def error_messages(errors: dict[str, str], language: str = "en") -> dict[str, str]:
    return {
        field_name: tr(language, f"error_{field_name}_{code.replace('-', '_')}")
        for field_name, code in errors.items()
    }
