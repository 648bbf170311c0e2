"""CLI commands for the cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.adjust_quantity import AdjustQuantityHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.events import CHANGE, CartChangeEvent
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import CartManager
from storefront.domain.model.pricing import PricingOptions
from storefront.infrastructure.bootstrap import cart_manager, product_repository, settings


def _echo_change(event: CartChangeEvent) -> None:
    if event.product_id is None:
        click.echo(f"Cart updated ({event.action})")
    else:
        click.echo(f"Cart updated ({event.action} #{event.product_id})")


def _open_cart() -> CartManager:
    """Load the persisted cart and print a line for every change."""
    cart = cart_manager()
    cart.on(CHANGE, _echo_change)
    return cart


def _pricing(coupon: str | None, tax_rate: str | None, shipping: str | None) -> PricingOptions:
    config = settings()
    return PricingOptions(
        coupon_discount=coupon or "0",
        tax_rate=tax_rate or config.tax_rate,
        shipping_cost=shipping or config.shipping_cost,
    )


def pricing_options(func):
    """Shared --coupon / --tax-rate / --shipping options."""
    func = click.option("--shipping", default=None, help="Flat shipping cost (e.g. 50).")(func)
    func = click.option("--tax-rate", default=None, help="Tax rate as a fraction (e.g. 0.16).")(func)
    func = click.option("--coupon", default=None, help="Coupon discount amount (e.g. 20).")(func)
    return func


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if dto.is_empty:
        click.echo("The cart is empty.")
        return

    click.echo(f"  {'ID':<4} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<4} {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Items':<32} {dto.item_count:>20}")
    click.echo(f"  {'Subtotal':<32} {dto.subtotal:>20}")
    click.echo(f"  {'Discount':<32} {dto.discount:>20}")
    click.echo(f"  {'Tax':<32} {dto.tax:>20}")
    click.echo(f"  {'Shipping':<32} {dto.shipping:>20}")
    click.echo(f"  {'Total':<32} {dto.total:>20}")


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Quantity to add.")
def cart_add(product_id: int, quantity: int) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddToCartHandler(cart=_open_cart(), product_repo=product_repository())

    try:
        product = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added '{product.name}' to the cart")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""
    if not _open_cart().remove_item(product_id):
        raise click.ClickException(f"Product #{product_id} is not in the cart")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity (0 removes).")
def cart_update(product_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    if not _open_cart().update_quantity(product_id, quantity):
        raise click.ClickException(f"Product #{product_id} is not in the cart")


@click.command("increase")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_increase(product_id: int) -> None:
    """Add one unit to a cart line."""
    if not AdjustQuantityHandler(_open_cart()).handle(product_id, 1):
        raise click.ClickException(f"Product #{product_id} is not in the cart")


@click.command("decrease")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_decrease(product_id: int) -> None:
    """Take one unit off a cart line (removes it at zero)."""
    if not AdjustQuantityHandler(_open_cart()).handle(product_id, -1):
        raise click.ClickException(f"Product #{product_id} is not in the cart")


@click.command("show")
@pricing_options
def cart_show(coupon: str | None, tax_rate: str | None, shipping: str | None) -> None:
    """Show the cart with its price summary."""
    try:
        dto = ShowCartHandler(cart_manager()).handle(_pricing(coupon, tax_rate, shipping))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    _open_cart().clear()


@click.command("checkout")
@pricing_options
def cart_checkout(coupon: str | None, tax_rate: str | None, shipping: str | None) -> None:
    """Confirm the order and empty the cart."""
    handler = ConfirmOrderHandler(_open_cart())

    try:
        receipt = handler.handle(_pricing(coupon, tax_rate, shipping))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order confirmed. Thank you for your purchase!")
    click.echo()
    _display_cart(receipt)
