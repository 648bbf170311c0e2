"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO
from storefront.application.mapping import cart_to_dto
from storefront.domain.model.cart import CartManager
from storefront.domain.model.pricing import PricingOptions


class ShowCartHandler:

    def __init__(self, cart: CartManager) -> None:
        self._cart = cart

    def handle(self, options: PricingOptions | None = None) -> CartDTO:
        return cart_to_dto(self._cart, options)
