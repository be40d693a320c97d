"""Application service: Add Catalog Item use case."""

from __future__ import annotations

from shopkernel.domain.exceptions import ValidationError
from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.model.value_objects import Money
from shopkernel.domain.repository.base import Repository
from shopkernel.domain.specification.base import Specification


class AddCatalogItemHandler:

    def __init__(self, catalog_repo: Repository[CatalogItem]) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        name: str,
        price: str,
        brand: str = "",
        type: str = "",
        picture_uri: str = "",
        description: str = "",
    ) -> CatalogItem:
        """Add a new item to the catalog. Names are unique (case-insensitive)."""
        wanted = (name or "").strip().lower()
        same_name = Specification().where(lambda c: c.name.lower() == wanted)
        if wanted and self._catalog_repo.count_matching(same_name):
            raise ValidationError(f"Catalog item '{name.strip()}' already exists")

        item = CatalogItem.create(
            name=name,
            price=Money.of(price),
            description=description,
            picture_uri=picture_uri,
            brand=brand,
            type=type,
        )
        return self._catalog_repo.add(item)
