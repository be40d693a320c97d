"""Application service: Update Catalog Item price."""

from __future__ import annotations

from shopkernel.domain.exceptions import EntityNotFoundError
from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.model.value_objects import Money
from shopkernel.domain.repository.base import Repository


class UpdateCatalogPriceHandler:

    def __init__(self, catalog_repo: Repository[CatalogItem]) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, catalog_item_id: int, new_price: str) -> CatalogItem:
        """Update a catalog item's price.

        Baskets keep the price captured when the item was added, and
        orders keep the price they were placed at.
        """
        item = self._catalog_repo.get_by_id(catalog_item_id)
        if item is None:
            raise EntityNotFoundError(f"Catalog item #{catalog_item_id} not found")

        item.update_price(Money.of(new_price))
        self._catalog_repo.update(item)
        return item
