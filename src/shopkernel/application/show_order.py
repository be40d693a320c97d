"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shopkernel.application.dto import OrderDTO, order_to_dto
from shopkernel.domain.exceptions import EntityNotFoundError
from shopkernel.domain.model.order import Order
from shopkernel.domain.repository.base import ReadRepository
from shopkernel.domain.specification import order_with_items_by_id


class ShowOrderHandler:

    def __init__(self, order_repo: ReadRepository[Order]) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.first_matching(order_with_items_by_id(order_id))
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order_to_dto(order)
