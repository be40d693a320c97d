"""Application service: Show Basket use case (query)."""

from __future__ import annotations

from shopkernel.application.dto import BasketDTO, basket_to_dto
from shopkernel.domain.model.basket import Basket
from shopkernel.domain.repository.base import ReadRepository
from shopkernel.domain.specification import basket_with_items_by_buyer


class ShowBasketHandler:

    def __init__(self, basket_repo: ReadRepository[Basket]) -> None:
        self._basket_repo = basket_repo

    def handle(self, buyer_id: str) -> BasketDTO | None:
        basket = self._basket_repo.first_matching(basket_with_items_by_buyer(buyer_id.strip()))
        return None if basket is None else basket_to_dto(basket)
