"""Application service: List a buyer's orders (query)."""

from __future__ import annotations

from shopkernel.application.dto import OrderSummaryDTO, order_to_summary
from shopkernel.domain.model.order import Order
from shopkernel.domain.repository.base import ReadRepository
from shopkernel.domain.specification import customer_orders_with_items


class ListBuyerOrdersHandler:

    def __init__(self, order_repo: ReadRepository[Order]) -> None:
        self._order_repo = order_repo

    def handle(self, buyer_id: str) -> list[OrderSummaryDTO]:
        """Newest first; an unknown buyer simply has no orders."""
        orders = self._order_repo.list_matching(customer_orders_with_items(buyer_id.strip()))
        return [order_to_summary(order) for order in orders]
