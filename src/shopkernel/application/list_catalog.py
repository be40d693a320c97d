"""Application service: Browse the catalog one page at a time (query)."""

from __future__ import annotations

from shopkernel.application.dto import CatalogPageDTO, catalog_item_to_dto
from shopkernel.domain.exceptions import ValidationError
from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.repository.base import ReadRepository
from shopkernel.domain.specification import catalog_filter, catalog_filter_paginated

DEFAULT_PAGE_SIZE = 10


class ListCatalogHandler:

    def __init__(self, catalog_repo: ReadRepository[CatalogItem]) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        brand: str | None = None,
        type: str | None = None,
    ) -> CatalogPageDTO:
        if page < 1:
            raise ValidationError("Page must be 1 or greater")

        paged = catalog_filter_paginated(
            skip=(page - 1) * page_size, take=page_size, brand=brand, type=type
        )
        items = self._catalog_repo.list_matching(paged)
        total = self._catalog_repo.count_matching(catalog_filter(brand=brand, type=type))

        return CatalogPageDTO(
            items=[catalog_item_to_dto(item) for item in items],
            page=page,
            page_size=page_size,
            total_items=total,
        )
