"""Domain service: Order creation.

Turns a basket into a placed Order. This is the one workflow that touches
three aggregate types (Basket, CatalogItem, Order), so it lives in the
domain layer rather than in a single aggregate.

Pricing policy: each order line keeps the unit price captured in the basket
(the price the buyer saw), while the product name and picture are refreshed
from the catalog as it is at checkout.

Steps run in a fixed order and stop at the first failure. Everything is
validated and built in memory before the single ``add`` call, so a failed
checkout never leaves a partial order behind. The basket is left untouched;
clearing it is up to the caller.
"""

from __future__ import annotations

import structlog

from shopkernel.domain.exceptions import EntityNotFoundError, ValidationError
from shopkernel.domain.model.basket import Basket
from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.model.order import Order, OrderItem
from shopkernel.domain.model.value_objects import Address, CatalogItemOrdered
from shopkernel.domain.repository.base import ReadRepository, Repository
from shopkernel.domain.specification import basket_with_items, catalog_items_by_ids

logger = structlog.get_logger(__name__)


class OrderService:

    def __init__(
        self,
        order_repo: Repository[Order],
        basket_repo: ReadRepository[Basket],
        catalog_repo: ReadRepository[CatalogItem],
    ) -> None:
        self._order_repo = order_repo
        self._basket_repo = basket_repo
        self._catalog_repo = catalog_repo

    def create_order(self, basket_id: int, ship_to_address: Address) -> Order:
        """Create an order from the basket's current contents.

        Raises EntityNotFoundError when the basket, or a catalog item one of
        its lines refers to, no longer exists; ValidationError when the
        basket is empty or the order breaks an Order invariant.
        """
        basket = self._basket_repo.first_matching(basket_with_items(basket_id))
        if basket is None:
            raise EntityNotFoundError(f"Basket #{basket_id} not found")

        lines = [item for item in basket.items if item.quantity > 0]
        if not lines:
            raise ValidationError("Cannot checkout an empty basket")

        catalog_ids = {item.catalog_item_id for item in lines}
        catalog = {
            item.id: item
            for item in self._catalog_repo.list_matching(catalog_items_by_ids(catalog_ids))
        }

        missing = sorted(catalog_ids - catalog.keys())
        if missing:
            logger.warning(
                "Basket references missing catalog items",
                basket_id=basket_id,
                catalog_item_ids=missing,
            )
            raise EntityNotFoundError(
                f"Catalog item(s) {', '.join(map(str, missing))} in basket "
                f"#{basket_id} no longer exist"
            )

        order_items: list[OrderItem] = []
        for line in lines:
            current = catalog[line.catalog_item_id]
            snapshot = CatalogItemOrdered(
                catalog_item_id=line.catalog_item_id,
                product_name=current.name,
                picture_uri=current.picture_uri,
            )
            order_items.append(
                OrderItem(
                    item_ordered=snapshot,
                    unit_price=line.unit_price,
                    units=line.quantity,
                )
            )

        order = Order.create(
            buyer_id=basket.buyer_id,
            ship_to_address=ship_to_address,
            items=order_items,
        )
        order = self._order_repo.add(order)

        logger.info(
            "Order created",
            order_id=order.id,
            basket_id=basket_id,
            buyer_id=order.buyer_id,
            lines=len(order.items),
            total=str(order.total),
        )
        return order
