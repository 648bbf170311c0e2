"""In-memory fakes for testing.

These implement the same abstract interfaces as the real storage and
catalog but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.exceptions import StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_storage import CartStorage
from storefront.domain.repository.product_repository import ProductRepository


class FakeStorage(CartStorage):
    """Dict-backed storage that can be told to fail on read or write."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(entries or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("storage disabled")
        return self.entries.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("quota exceeded")
        self.writes += 1
        self.entries[key] = value


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())


def make_product(
    product_id: int = 1,
    name: str = "Mai Sakurajima",
    price: str = "250",
) -> Product:
    """Helper to build a valid catalog product."""
    return Product(
        id=product_id,
        name=name,
        series="Test Series",
        price=Decimal(price),
        image=f"images/{product_id}.png",
    )
