"""Application service: Checkout use case.

Places the order and then deletes the basket. The two writes are separate:
if the basket deletion fails, the order stays placed and the error is
raised to the caller.
"""

from __future__ import annotations

from shopkernel.application.dto import OrderDTO, order_to_dto
from shopkernel.domain.model.value_objects import Address
from shopkernel.domain.service.basket_service import BasketService
from shopkernel.domain.service.order_service import OrderService


class CheckoutHandler:

    def __init__(self, order_service: OrderService, basket_service: BasketService) -> None:
        self._order_service = order_service
        self._basket_service = basket_service

    def handle(self, basket_id: int, ship_to_address: Address) -> OrderDTO:
        order = self._order_service.create_order(basket_id, ship_to_address)
        self._basket_service.delete_basket(basket_id)
        return order_to_dto(order)
