import click

from invledger.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_show,
    product_update,
)
from invledger.infrastructure.cli.stock_commands import stock_adjust, stock_low
from invledger.infrastructure.cli.store_commands import (
    store_add,
    store_list,
    store_remove,
    store_revenue,
    store_stats,
    store_update,
)
from invledger.infrastructure.logging import configure_logging
from invledger.infrastructure.settings import get_settings


@click.group()
def cli() -> None:
    """invledger: multi-store inventory ledger"""
    try:
        config = get_settings()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    configure_logging(config)


@cli.group()
def store() -> None:
    """Manage stores and view store reports."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust stock and check low-stock products."""


# Register subcommands
store.add_command(store_add)
store.add_command(store_list)
store.add_command(store_remove)
store.add_command(store_revenue)
store.add_command(store_stats)
store.add_command(store_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_adjust)
stock.add_command(stock_low)
