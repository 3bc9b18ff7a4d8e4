"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from invledger.application.add_product import AddProductHandler
from invledger.application.remove_product import RemoveProductHandler
from invledger.application.show_product import ListStoreProductsHandler, ShowProductHandler
from invledger.application.update_product import UpdateProductHandler
from invledger.domain.exceptions import DomainException, RepositoryError
from invledger.infrastructure.bootstrap import product_repository, store_repository
from invledger.infrastructure.settings import get_settings


@click.command("add")
@click.option("--store", "store_id", required=True, help="Owning store ID.")
@click.option("--sku", required=True, help="Unique SKU.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", type=int, default=0, show_default=True, help="Initial stock.")
@click.option("--category", default=None, help="Category label.")
@click.option("--description", default=None, help="Free-text description.")
def product_add(
    store_id: str,
    sku: str,
    name: str,
    price: str,
    stock: int,
    category: str | None,
    description: str | None,
) -> None:
    """Add a new product to a store."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        store_repo=store_repository(),
    )

    try:
        product = handler.handle(
            store_id=store_id,
            sku=sku,
            name=name,
            price=price,
            stock=stock,
            category=category,
            description=description,
        )
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' ({product.sku}) added at {product.price}")


@click.command("list")
@click.option("--store", "store_id", required=True, help="Store ID.")
def product_list(store_id: str) -> None:
    """List the active products of a store."""
    handler = ListStoreProductsHandler(
        store_repo=store_repository(),
        product_repo=product_repository(),
    )

    try:
        products = handler.handle(store_id=store_id)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<14} {'Name':<20} {'Category':<16} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 78)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.sku:<14} {p.name:<20} {p.category_label:<16} {str(p.price):>10} {p.stock:>7}"
        )


@click.command("show")
@click.option("--id", "product_id", default=None, help="Product ID.")
@click.option("--sku", default=None, help="Product SKU.")
def product_show(product_id: str | None, sku: str | None) -> None:
    """Show a single product, looked up by ID or SKU."""
    if (product_id is None) == (sku is None):
        raise click.UsageError("Pass exactly one of --id or --sku.")

    handler = ShowProductHandler(product_repo=product_repository())

    try:
        product = handler.by_id(product_id) if product_id is not None else handler.by_sku(sku)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id}  {product.name}")
    click.echo(f"SKU:       {product.sku}")
    click.echo(f"Store:     {product.store_id}")
    click.echo(f"Category:  {product.category_label}")
    click.echo(f"Price:     {product.price}")
    click.echo(f"Stock:     {product.stock}")
    if product.description:
        click.echo(f"About:     {product.description}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Deactivate a product (soft delete)."""
    handler = RemoveProductHandler(
        product_repo=product_repository(),
        max_retries=get_settings().ADJUST_MAX_RETRIES,
    )

    try:
        handler.handle(product_id=product_id)
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New product name.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--price", default=None, help="New price (e.g. 15.00).")
@click.option("--category", default=None, help="New category (empty string clears it).")
@click.option("--description", default=None, help="New description (empty string clears it).")
@click.option("--store", "store_id", default=None, help="Move the product to this store.")
def product_update(
    product_id: str,
    name: str | None,
    sku: str | None,
    price: str | None,
    category: str | None,
    description: str | None,
    store_id: str | None,
) -> None:
    """Change a product's catalog details. Stock is left as it is."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        store_repo=store_repository(),
        max_retries=get_settings().ADJUST_MAX_RETRIES,
    )

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            sku=sku,
            price=price,
            category=category,
            description=description,
            store_id=store_id,
        )
    except (DomainException, RepositoryError) as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' ({product.sku}) updated: "
        f"store {product.store_id}, {product.price}, stock {product.stock}"
    )
