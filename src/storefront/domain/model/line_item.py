"""LineItem — one product and the quantity selected in the cart."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal


@dataclass
class LineItem:
    """A product snapshot plus quantity.

    ``id`` is the merge key: a cart never holds two items with the same id.
    Quantity stays within ``[MIN_QUANTITY, MAX_QUANTITY]``; the cart removes
    an item instead of letting it reach zero.
    """

    id: int
    name: str
    price: Decimal
    image: str
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def copy(self) -> LineItem:
        return replace(self)
