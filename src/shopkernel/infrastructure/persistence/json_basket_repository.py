"""JSON-file-backed repository for the Basket aggregate."""

from __future__ import annotations

from decimal import Decimal

from shopkernel.domain.model.basket import Basket, BasketItem
from shopkernel.domain.model.value_objects import Money
from shopkernel.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)


class JsonBasketRepository(JsonDocumentRepository[Basket]):

    entity_name = "Basket"
    relations = ("items",)

    @staticmethod
    def _to_raw(basket: Basket) -> dict:
        return {
            "id": basket.id,
            "buyer_id": basket.buyer_id,
            "items": [
                {
                    "catalog_item_id": item.catalog_item_id,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "quantity": item.quantity,
                }
                for item in basket.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Basket:
        return Basket(
            id=raw["id"],
            buyer_id=raw["buyer_id"],
            items=[
                BasketItem(
                    catalog_item_id=i["catalog_item_id"],
                    unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                    quantity=i["quantity"],
                )
                for i in raw["items"]
            ],
        )
