"""CLI commands for stock adjustments and low-stock alerts."""

from __future__ import annotations

import click

from invledger.application.adjust_stock import AdjustStockHandler
from invledger.application.low_stock import FindLowStockHandler
from invledger.domain.exceptions import DomainException, RepositoryError
from invledger.domain.model.product import AdjustmentMode
from invledger.infrastructure.bootstrap import product_repository, store_repository
from invledger.infrastructure.settings import get_settings


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add, subtract or set.")
@click.option(
    "--mode",
    required=True,
    type=click.Choice([m.value for m in AdjustmentMode]),
    help="add, subtract or set.",
)
@click.option("--reason", default=None, help="Why the stock changed (echoed only).")
def stock_adjust(product_id: str, quantity: int, mode: str, reason: str | None) -> None:
    """Adjust the stock of one product."""
    handler = AdjustStockHandler(
        product_repo=product_repository(),
        max_retries=get_settings().ADJUST_MAX_RETRIES,
    )

    try:
        result = handler.handle(
            product_id=product_id, quantity=quantity, mode=mode, reason=reason
        )
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{result.product.id} '{result.product.name}' ({result.product.sku}): "
        f"{result.previous_stock} -> {result.new_stock}  ({result.mode.value} {result.quantity})"
    )
    if result.reason:
        click.echo(f"Reason: {result.reason}")


@click.command("low")
@click.option(
    "--threshold",
    type=int,
    default=lambda: get_settings().LOW_STOCK_THRESHOLD,
    show_default="INVLEDGER_LOW_STOCK_THRESHOLD or 10",
    help="Stock level at or below which a product is listed.",
)
def stock_low(threshold: int) -> None:
    """List active products at or below the threshold, lowest first."""
    handler = FindLowStockHandler(
        product_repo=product_repository(),
        store_repo=store_repository(),
    )

    try:
        items = handler.handle(threshold=threshold)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo(f"No products at or below {threshold} units.")
        return

    click.echo(f"{'SKU':<14} {'Name':<20} {'Store':<24} {'Stock':>7}")
    click.echo("-" * 68)
    for item in items:
        store_label = item.store_name or f"#{item.store_id}"
        click.echo(f"{item.sku:<14} {item.name:<20} {store_label:<24} {item.stock:>7}")
