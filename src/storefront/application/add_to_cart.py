"""Application service: Add To Cart use case.

Resolves the product through the catalog so the cart only ever receives
real catalog entries, then lets the cart merge and clamp the quantity.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartManager
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, cart: CartManager, product_repo: ProductRepository) -> None:
        self._cart = cart
        self._product_repo = product_repo

    def handle(self, product_id: int, quantity: int = 1) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        self._cart.add_item(product, quantity)
        return product
