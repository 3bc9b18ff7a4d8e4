"""CLI commands for stores and store-level reports."""

from __future__ import annotations

import click

from invledger.application.add_store import AddStoreHandler
from invledger.application.remove_store import RemoveStoreHandler
from invledger.application.store_revenue import GetStoreRevenueHandler
from invledger.application.store_stats import GetStoreStatsHandler
from invledger.application.update_store import UpdateStoreHandler
from invledger.domain.exceptions import DomainException, RepositoryError
from invledger.infrastructure.bootstrap import product_repository, store_repository
from invledger.infrastructure.settings import get_settings


@click.command("add")
@click.option("--name", required=True, help="Store name.")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", default=None, help="City.")
def store_add(name: str, address: str, city: str | None) -> None:
    """Register a new store."""
    handler = AddStoreHandler(store_repo=store_repository())

    try:
        store = handler.handle(name=name, address=address, city=city)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store.id} '{store.name}' added")


@click.command("list")
def store_list() -> None:
    """List active stores."""
    try:
        stores = store_repository().list_all(active_only=True)
    except RepositoryError as exc:
        raise click.ClickException(str(exc))

    if not stores:
        click.echo("No stores found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'City':<20}")
    click.echo("-" * 58)
    for s in stores:
        click.echo(f"{s.id:<6} {s.name:<30} {s.city or '':<20}")


@click.command("stats")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option(
    "--threshold",
    type=int,
    default=lambda: get_settings().LOW_STOCK_THRESHOLD,
    show_default="INVLEDGER_LOW_STOCK_THRESHOLD or 10",
    help="Stock level at or below which a product counts as low.",
)
def store_stats(store_id: str, threshold: int) -> None:
    """Show inventory statistics for a store."""
    handler = GetStoreStatsHandler(
        store_repo=store_repository(),
        product_repo=product_repository(),
    )

    try:
        stats = handler.handle(store_id=store_id, low_stock_threshold=threshold)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{stats.store_id}  {stats.store_name}")
    click.echo(f"Active products:  {stats.total_products}")
    click.echo(f"Inventory value:  ${stats.total_inventory_value}")
    click.echo(f"Low stock (<= {stats.low_stock_threshold}): {stats.low_stock_products}")
    click.echo()
    click.echo(f"  {'Category':<24} {'Products':>9} {'Value':>14}")
    click.echo(f"  {'-'*49}")
    for cat in stats.products_by_category:
        click.echo(f"  {cat.category:<24} {cat.product_count:>9} {'$' + str(cat.total_value):>14}")


@click.command("revenue")
@click.option("--id", "store_id", required=True, help="Store ID.")
def store_revenue(store_id: str) -> None:
    """Show inventory value and pricing figures for a store."""
    handler = GetStoreRevenueHandler(
        store_repo=store_repository(),
        product_repo=product_repository(),
    )

    try:
        revenue = handler.handle(store_id=store_id)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{revenue.store_id}  {revenue.store_name}")
    click.echo(f"Inventory value:  ${revenue.total_inventory_value}")
    click.echo(f"Active products:  {revenue.total_products}")
    click.echo(f"Units in stock:   {revenue.total_stock}")
    click.echo(f"Average price:    ${revenue.average_product_price}")


@click.command("update")
@click.option("--id", "store_id", required=True, help="Store ID.")
@click.option("--name", default=None, help="New store name.")
@click.option("--address", default=None, help="New street address.")
@click.option("--city", default=None, help="New city (empty string clears it).")
def store_update(
    store_id: str,
    name: str | None,
    address: str | None,
    city: str | None,
) -> None:
    """Change a store's name or location."""
    handler = UpdateStoreHandler(store_repo=store_repository())

    try:
        store = handler.handle(store_id=store_id, name=name, address=address, city=city)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store.id} '{store.name}' updated")


@click.command("remove")
@click.option("--id", "store_id", required=True, help="Store ID.")
def store_remove(store_id: str) -> None:
    """Deactivate a store (soft delete). Its products are left in place."""
    handler = RemoveStoreHandler(store_repo=store_repository())

    try:
        handler.handle(store_id=store_id)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} removed")
