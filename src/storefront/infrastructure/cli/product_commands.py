"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.model.value_objects import format_money
from storefront.infrastructure.bootstrap import product_repository


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<20} {'Series':<40} {'Price':>10}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.id:<4} {p.name:<20} {p.series[:40]:<40} {format_money(p.price):>10}")
