"""JSON-file-backed repository for CatalogItem."""

from __future__ import annotations

from decimal import Decimal

from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.model.value_objects import Money
from shopkernel.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)


class JsonCatalogRepository(JsonDocumentRepository[CatalogItem]):

    entity_name = "Catalog item"

    @staticmethod
    def _to_raw(item: CatalogItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "description": item.description,
            "price": str(item.price.amount),
            "currency": item.price.currency,
            "picture_uri": item.picture_uri,
            "brand": item.brand,
            "type": item.type,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CatalogItem:
        return CatalogItem(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            picture_uri=raw.get("picture_uri", ""),
            brand=raw.get("brand", ""),
            type=raw.get("type", ""),
        )
