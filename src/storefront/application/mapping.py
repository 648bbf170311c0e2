"""Shared mapping from the cart to its display DTO."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.domain.model.cart import CartManager
from storefront.domain.model.pricing import PricingOptions
from storefront.domain.model.value_objects import format_money


def cart_to_dto(cart: CartManager, options: PricingOptions | None = None) -> CartDTO:
    summary = cart.get_summary(options)
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=item.id,
                name=item.name,
                quantity=item.quantity,
                unit_price=format_money(item.price),
                line_total=format_money(item.line_total),
            )
            for item in cart.get_items()
        ],
        item_count=summary.item_count,
        subtotal=format_money(summary.subtotal),
        discount=format_money(summary.discount),
        tax=format_money(summary.tax),
        shipping=format_money(summary.shipping),
        total=format_money(summary.total),
    )
