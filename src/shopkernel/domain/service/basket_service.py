"""Domain service: Basket workflows.

Loads the buyer's basket through the repository, applies a Basket
aggregate method, and writes the result back. The aggregate enforces the
invariants; this service only decides *which* basket and whether it is an
insert or an update.

There is no locking: two concurrent calls for the same buyer can both read
the same basket and the last write wins.
"""

from __future__ import annotations

import structlog

from shopkernel.domain.exceptions import EntityNotFoundError
from shopkernel.domain.model.basket import Basket, normalize_buyer_id
from shopkernel.domain.model.value_objects import Money
from shopkernel.domain.repository.base import Repository
from shopkernel.domain.specification import basket_with_items, basket_with_items_by_buyer

logger = structlog.get_logger(__name__)


class BasketService:

    def __init__(self, basket_repo: Repository[Basket]) -> None:
        self._basket_repo = basket_repo

    def add_item_to_basket(
        self,
        buyer_id: str,
        catalog_item_id: int,
        price: Money,
        quantity: int = 1,
    ) -> Basket:
        """Add an item to the buyer's basket, creating the basket if needed."""
        buyer_id = normalize_buyer_id(buyer_id)
        basket = self._basket_repo.first_matching(basket_with_items_by_buyer(buyer_id))

        if basket is None:
            basket = Basket.create(buyer_id)
            basket.add_item(catalog_item_id, price, quantity)
            basket = self._basket_repo.add(basket)
            logger.info(
                "Basket created",
                basket_id=basket.id,
                buyer_id=basket.buyer_id,
                catalog_item_id=catalog_item_id,
                quantity=quantity,
            )
            return basket

        basket.add_item(catalog_item_id, price, quantity)
        self._basket_repo.update(basket)
        logger.info(
            "Item added to basket",
            basket_id=basket.id,
            catalog_item_id=catalog_item_id,
            quantity=quantity,
            total_items=basket.total_items,
        )
        return basket

    def set_quantities(self, basket_id: int, quantities: dict[str, int]) -> Basket:
        """Set line quantities keyed by line key; zero removes the line.

        Keys that do not match a line in the basket are ignored.
        """
        basket = self._get_basket(basket_id)

        for item in basket.items:
            if item.key in quantities:
                basket.set_quantity(item.catalog_item_id, quantities[item.key])
        basket.remove_empty_items()

        self._basket_repo.update(basket)
        logger.info(
            "Basket quantities updated",
            basket_id=basket_id,
            lines=len(basket.items),
            total_items=basket.total_items,
        )
        return basket

    def delete_basket(self, basket_id: int) -> None:
        basket = self._basket_repo.get_by_id(basket_id)
        if basket is None:
            raise EntityNotFoundError(f"Basket #{basket_id} not found")
        self._basket_repo.delete(basket)
        logger.info("Basket deleted", basket_id=basket_id, buyer_id=basket.buyer_id)

    def transfer_basket(self, anonymous_id: str, user_name: str) -> None:
        """Hand an anonymous buyer's basket over to a signed-in user.

        If the user already owns a basket, the anonymous lines are merged
        into it and the anonymous basket is deleted; otherwise the anonymous
        basket simply changes owner.
        """
        anonymous_id = normalize_buyer_id(anonymous_id)
        user_name = normalize_buyer_id(user_name)
        if anonymous_id == user_name:
            return

        anonymous_basket = self._basket_repo.first_matching(
            basket_with_items_by_buyer(anonymous_id)
        )
        if anonymous_basket is None:
            logger.debug("No basket to transfer", anonymous_id=anonymous_id)
            return

        user_basket = self._basket_repo.first_matching(basket_with_items_by_buyer(user_name))
        if user_basket is None:
            anonymous_basket.set_new_buyer_id(user_name)
            self._basket_repo.update(anonymous_basket)
            logger.info(
                "Basket transferred",
                basket_id=anonymous_basket.id,
                buyer_id=anonymous_basket.buyer_id,
            )
            return

        for item in anonymous_basket.items:
            user_basket.add_item(item.catalog_item_id, item.unit_price, item.quantity)
        self._basket_repo.update(user_basket)
        self._basket_repo.delete(anonymous_basket)
        logger.info(
            "Basket merged into existing user basket",
            basket_id=user_basket.id,
            merged_basket_id=anonymous_basket.id,
            buyer_id=user_basket.buyer_id,
        )

    def get_or_create_basket_for_user(self, buyer_id: str) -> Basket:
        buyer_id = normalize_buyer_id(buyer_id)
        basket = self._basket_repo.first_matching(basket_with_items_by_buyer(buyer_id))
        if basket is not None:
            return basket
        basket = self._basket_repo.add(Basket.create(buyer_id))
        logger.info("Basket created", basket_id=basket.id, buyer_id=basket.buyer_id)
        return basket

    def count_total_basket_items(self, buyer_id: str) -> int:
        buyer_id = normalize_buyer_id(buyer_id)
        basket = self._basket_repo.first_matching(basket_with_items_by_buyer(buyer_id))
        return 0 if basket is None else basket.total_items

    # --- Internal helpers -----------------------------------------------------

    def _get_basket(self, basket_id: int) -> Basket:
        basket = self._basket_repo.first_matching(basket_with_items(basket_id))
        if basket is None:
            raise EntityNotFoundError(f"Basket #{basket_id} not found")
        return basket
