"""Application service: Confirm Order use case.

Takes a priced snapshot of the cart as the receipt and then empties the
cart. Submitting the order anywhere is left to the caller.
"""

from __future__ import annotations

import logging

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartManager
from storefront.domain.model.pricing import PricingOptions

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(self, cart: CartManager) -> None:
        self._cart = cart

    def handle(self, options: PricingOptions | None = None) -> CartDTO:
        if self._cart.is_empty():
            raise ValidationError("Cannot confirm an order: the cart is empty")

        # Snapshot before clearing
        receipt = cart_to_dto(self._cart, options)
        self._cart.clear()

        logger.info("Order confirmed: %d item(s), total %s", receipt.item_count, receipt.total)
        return receipt
