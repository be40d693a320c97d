"""CLI commands for the catalog."""

from __future__ import annotations

import click

from shopkernel.application.add_catalog_item import AddCatalogItemHandler
from shopkernel.application.list_catalog import DEFAULT_PAGE_SIZE, ListCatalogHandler
from shopkernel.application.update_catalog_price import UpdateCatalogPriceHandler
from shopkernel.infrastructure.bootstrap import catalog_repository
from shopkernel.infrastructure.cli.errors import handle_errors


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--brand", default="", help="Brand name.")
@click.option("--type", "type_", default="", help="Product type.")
@click.option("--picture", default="", help="Picture URI.")
@click.option("--description", default="", help="Description.")
def catalog_add(
    name: str, price: str, brand: str, type_: str, picture: str, description: str
) -> None:
    """Add a new item to the catalog."""
    handler = AddCatalogItemHandler(catalog_repo=catalog_repository())

    with handle_errors():
        item = handler.handle(
            name=name,
            price=price,
            brand=brand,
            type=type_,
            picture_uri=picture,
            description=description,
        )

    click.echo(f"Catalog item #{item.id} '{item.name}' added at {item.price}")


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number.")
@click.option("--page-size", default=DEFAULT_PAGE_SIZE, show_default=True, type=click.IntRange(min=1))
@click.option("--brand", default=None, help="Only this brand.")
@click.option("--type", "type_", default=None, help="Only this product type.")
def catalog_list(page: int, page_size: int, brand: str | None, type_: str | None) -> None:
    """List catalog items, one page at a time."""
    handler = ListCatalogHandler(catalog_repo=catalog_repository())

    with handle_errors():
        dto = handler.handle(page=page, page_size=page_size, brand=brand, type=type_)

    if not dto.items:
        click.echo("No catalog items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Brand':<12} {'Type':<12} {'Price':>10}")
    click.echo("-" * 68)
    for item in dto.items:
        click.echo(
            f"{item.id:<6} {item.name:<24} {item.brand:<12} {item.type:<12} {item.price:>10}"
        )
    click.echo(f"Page {dto.page} of {dto.total_pages} ({dto.total_items} items)")


@click.command("update-price")
@click.option("--id", "catalog_item_id", required=True, type=int, help="Catalog item ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def catalog_update_price(catalog_item_id: int, price: str) -> None:
    """Update a catalog item's price."""
    handler = UpdateCatalogPriceHandler(catalog_repo=catalog_repository())

    with handle_errors():
        item = handler.handle(catalog_item_id=catalog_item_id, new_price=price)

    click.echo(f"Catalog item #{item.id} price updated to {item.price}")
