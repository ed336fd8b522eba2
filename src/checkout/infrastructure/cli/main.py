import click

from checkout.infrastructure.cli.order_commands import order_create, order_quote
from checkout.infrastructure.cli.product_commands import product_list
from checkout.infrastructure.config import get_settings
from checkout.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Checkout: price orders and start their payment."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)


@cli.group()
def order() -> None:
    """Create and quote orders."""


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_quote)
product.add_command(product_list)
