"""JSON-file-backed repository for the Order aggregate.

An order document embeds its shipping address and every line's catalog
snapshot, so it never needs the catalog to be read back.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from shopkernel.domain.model.order import Order, OrderItem
from shopkernel.domain.model.value_objects import Address, CatalogItemOrdered, Money
from shopkernel.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)


class JsonOrderRepository(JsonDocumentRepository[Order]):

    entity_name = "Order"
    relations = ("items",)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        address = order.ship_to_address
        return {
            "id": order.id,
            "buyer_id": order.buyer_id,
            "order_date": order.order_date.isoformat(),
            "ship_to_address": {
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "country": address.country,
                "zip_code": address.zip_code,
            },
            "items": [
                {
                    "catalog_item_id": item.item_ordered.catalog_item_id,
                    "product_name": item.item_ordered.product_name,
                    "picture_uri": item.item_ordered.picture_uri,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "units": item.units,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                item_ordered=CatalogItemOrdered(
                    catalog_item_id=i["catalog_item_id"],
                    product_name=i["product_name"],
                    picture_uri=i.get("picture_uri", ""),
                ),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                units=i["units"],
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            buyer_id=raw["buyer_id"],
            ship_to_address=Address(**raw["ship_to_address"]),
            items=items,
            order_date=datetime.fromisoformat(raw["order_date"]),
        )
