"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from checkout.infrastructure.bootstrap import product_catalog


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_catalog().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<8} {'Name':<20} {'Category':<12} {'Net EUR':>10} {'VAT':>5}")
    click.echo("-" * 59)
    for p in products:
        click.echo(
            f"{p.sku:<8} {p.name:<20} {p.category:<12} "
            f"{str(p.net_unit_price):>10} {p.vat.value:>4}%"
        )
