"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from shopkernel.application.dto import OrderDTO
from shopkernel.application.list_orders import ListBuyerOrdersHandler
from shopkernel.application.show_order import ShowOrderHandler
from shopkernel.infrastructure.bootstrap import order_repository
from shopkernel.infrastructure.cli.errors import handle_errors


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (buyer={dto.buyer_id})")
    click.echo(f"Placed:   {dto.order_date}")
    click.echo(f"Ship to:  {dto.ship_to}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.units:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of a placed order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    with handle_errors():
        dto = handler.handle(order_id)

    display_order(dto)


@click.command("list")
@click.option("--buyer", required=True, help="User name.")
def order_list(buyer: str) -> None:
    """List a buyer's orders, newest first."""
    handler = ListBuyerOrdersHandler(order_repo=order_repository())

    with handle_errors():
        orders = handler.handle(buyer)

    if not orders:
        click.echo(f"No orders found for '{buyer}'.")
        return

    click.echo(f"{'ID':<6} {'Date':<22} {'Lines':>6} {'Total':>12}")
    click.echo("-" * 49)
    for summary in orders:
        click.echo(
            f"{summary.id:<6} {summary.order_date:<22} {summary.lines:>6} {summary.total:>12}"
        )
