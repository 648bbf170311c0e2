"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$250.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart contents plus its priced summary."""

    items: list[CartLineDTO]
    item_count: int
    subtotal: str
    discount: str
    tax: str
    shipping: str
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items
