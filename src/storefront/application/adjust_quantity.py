"""Application service: step a cart line up or down by *delta*.

Decreasing a line that holds a single unit removes it, because the cart
treats a quantity of zero as a removal.
"""

from __future__ import annotations

from storefront.domain.model.cart import CartManager


class AdjustQuantityHandler:

    def __init__(self, cart: CartManager) -> None:
        self._cart = cart

    def handle(self, product_id: int, delta: int) -> bool:
        item = self._cart.get_item(product_id)
        if item is None:
            return False
        return self._cart.update_quantity(product_id, item.quantity + delta)
