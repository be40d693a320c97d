"""CLI commands for the Basket aggregate."""

from __future__ import annotations

import click

from shopkernel.application.checkout import CheckoutHandler
from shopkernel.application.show_basket import ShowBasketHandler
from shopkernel.domain.exceptions import EntityNotFoundError
from shopkernel.domain.model.value_objects import Address
from shopkernel.infrastructure.bootstrap import (
    basket_repository,
    basket_service,
    catalog_repository,
    order_service,
)
from shopkernel.infrastructure.cli.errors import handle_errors
from shopkernel.infrastructure.cli.order_commands import display_order


def _parse_quantities(raw: str) -> dict[str, int]:
    """Parse '5:0,7:2' into {line key: quantity}."""
    result: dict[str, int] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'CatalogItemId:Quantity'."
            )
        key, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{key}'."
            )
        result[key.strip()] = qty
    return result


@click.command("add")
@click.option("--buyer", required=True, help="User name or anonymous id.")
@click.option("--item", "catalog_item_id", required=True, type=int, help="Catalog item ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
def basket_add(buyer: str, catalog_item_id: int, quantity: int) -> None:
    """Add a catalog item to a buyer's basket at its current price."""
    with handle_errors():
        item = catalog_repository().get_by_id(catalog_item_id)
        if item is None:
            raise EntityNotFoundError(f"Catalog item #{catalog_item_id} not found")
        basket = basket_service().add_item_to_basket(
            buyer, catalog_item_id, item.price, quantity
        )

    click.echo(
        f"Added {quantity} x '{item.name}' to basket #{basket.id} "
        f"({basket.total_items} items, {basket.total})"
    )


@click.command("set")
@click.option("--id", "basket_id", required=True, type=int, help="Basket ID.")
@click.option("--items", required=True, help="Quantities as 'CatalogItemId:Qty,...'; 0 removes.")
def basket_set(basket_id: int, items: str) -> None:
    """Set line quantities in a basket."""
    quantities = _parse_quantities(items)

    with handle_errors():
        basket = basket_service().set_quantities(basket_id, quantities)

    click.echo(f"Basket #{basket.id} updated ({basket.total_items} items, {basket.total})")


@click.command("show")
@click.option("--buyer", required=True, help="User name or anonymous id.")
def basket_show(buyer: str) -> None:
    """Show a buyer's basket."""
    handler = ShowBasketHandler(basket_repo=basket_repository())

    with handle_errors():
        dto = handler.handle(buyer)

    if dto is None or not dto.items:
        click.echo(f"Basket for '{buyer}' is empty.")
        return

    click.echo(f"Basket #{dto.id}  (buyer={dto.buyer_id})")
    click.echo()
    click.echo(f"  {'Item':<8} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*35}")
    for line in dto.items:
        click.echo(
            f"  {line.catalog_item_id:<8} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*35}")
    click.echo(f"  {'Basket Total':<15} {dto.total:>20}")


@click.command("delete")
@click.option("--id", "basket_id", required=True, type=int, help="Basket ID.")
def basket_delete(basket_id: int) -> None:
    """Delete a basket and all its lines."""
    with handle_errors():
        basket_service().delete_basket(basket_id)

    click.echo(f"Basket #{basket_id} deleted.")


@click.command("transfer")
@click.option("--from", "anonymous_id", required=True, help="Anonymous buyer id.")
@click.option("--to", "user_name", required=True, help="Signed-in user name.")
def basket_transfer(anonymous_id: str, user_name: str) -> None:
    """Give an anonymous buyer's basket to a signed-in user."""
    with handle_errors():
        basket_service().transfer_basket(anonymous_id, user_name)

    click.echo(f"Basket of '{anonymous_id}' transferred to '{user_name}'.")


@click.command("checkout")
@click.option("--id", "basket_id", required=True, type=int, help="Basket ID.")
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--state", default=None)
@click.option("--country", required=True)
@click.option("--zip", "zip_code", required=True)
def basket_checkout(
    basket_id: int,
    street: str,
    city: str,
    state: str | None,
    country: str,
    zip_code: str,
) -> None:
    """Place an order from a basket, then delete the basket."""
    handler = CheckoutHandler(order_service=order_service(), basket_service=basket_service())

    with handle_errors():
        address = Address(
            street=street, city=city, state=state, country=country, zip_code=zip_code
        )
        dto = handler.handle(basket_id, address)

    click.echo("Thanks for your order!")
    display_order(dto)
