"""Value helpers shared across the cart domain.

Quantities are plain ints bounded by MAX_QUANTITY; money amounts are
Decimals so sums and tax never drift through float rounding.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

MAX_QUANTITY = 99
MIN_QUANTITY = 1

CENTS = Decimal("0.01")


# --- Quantity -----------------------------------------------------------------


def clamp_quantity(value: int) -> int:
    """Force *value* into ``[MIN_QUANTITY, MAX_QUANTITY]``."""
    return max(MIN_QUANTITY, min(int(value), MAX_QUANTITY))


def cap_quantity(value: int) -> int:
    """Apply only the upper bound; callers handle ``<= 0`` themselves."""
    return min(int(value), MAX_QUANTITY)


# --- Money --------------------------------------------------------------------


def is_number(value: object) -> bool:
    """True for finite int/float/Decimal values (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return to_decimal(value).is_finite()


def to_decimal(value: str | float | int | Decimal) -> Decimal:
    """Coerce to Decimal via ``str`` so floats keep their printed value."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {value!r}") from exc


def round_money(value: Decimal) -> Decimal:
    """Round to cents, halves away from zero."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_json_number(value: Decimal) -> int | float:
    """Render a Decimal as the narrowest JSON-native number."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def format_money(value: Decimal) -> str:
    return f"${value:.2f}"
