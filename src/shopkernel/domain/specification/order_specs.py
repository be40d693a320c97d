"""Order specifications."""

from __future__ import annotations

from shopkernel.domain.model.order import Order
from shopkernel.domain.specification.base import Specification

ITEMS = "items"


def customer_orders_with_items(buyer_id: str) -> Specification[Order]:
    """All orders placed by *buyer_id*, newest first."""
    return (
        Specification()
        .where(lambda o: o.buyer_id == buyer_id)
        .include(ITEMS)
        .order_by(lambda o: (o.order_date, o.id or 0), descending=True)
    )


def order_with_items_by_id(order_id: int) -> Specification[Order]:
    return Specification().where(lambda o: o.id == order_id).include(ITEMS)
