"""Abstract read-only access to the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is reference data: the cart only reads it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in display order."""
