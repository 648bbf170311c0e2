import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_decrease,
    cart_increase,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import ConfigError
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from STOREFRONT_LOG_LEVEL).")
def cli(log_level: str | None) -> None:
    """Storefront — session cart"""
    try:
        config = settings()
    except ConfigError as exc:
        raise click.ClickException(str(exc))

    configure_logging(log_level or config.log_level)


@cli.group()
def cart() -> None:
    """Manage the cart."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_decrease)
cart.add_command(cart_increase)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_list)
