"""Product — a catalog entry that can be added to the cart.

Products live independently of the cart. The cart copies ``id``, ``name``,
``price`` and ``image`` when an item is added, so later catalog changes do
not reach lines already in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    series: str
    price: Decimal
    image: str
