"""Basket specifications."""

from __future__ import annotations

from shopkernel.domain.model.basket import Basket
from shopkernel.domain.specification.base import Specification

ITEMS = "items"


def basket_with_items(basket_id: int) -> Specification[Basket]:
    """A basket by id, with its lines."""
    return Specification().where(lambda b: b.id == basket_id).include(ITEMS)


def basket_with_items_by_buyer(buyer_id: str) -> Specification[Basket]:
    """The basket owned by *buyer_id* (user name or anonymous id), with its lines."""
    return Specification().where(lambda b: b.buyer_id == buyer_id).include(ITEMS)
