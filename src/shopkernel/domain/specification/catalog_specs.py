"""Catalog specifications."""

from __future__ import annotations

from typing import Iterable

from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.specification.base import Specification


def catalog_items_by_ids(ids: Iterable[int]) -> Specification[CatalogItem]:
    """Catalog items whose id is in *ids*. Result order is unspecified."""
    wanted = frozenset(ids)
    return Specification().where(lambda c: c.id in wanted)


def catalog_filter(
    brand: str | None = None,
    type: str | None = None,
) -> Specification[CatalogItem]:
    """Items matching an optional brand and type (case-insensitive), by name."""
    spec = Specification().order_by(lambda c: (c.name.lower(), c.id))
    if brand:
        spec = spec.where(lambda c: c.brand.lower() == brand.lower())
    if type:
        spec = spec.where(lambda c: c.type.lower() == type.lower())
    return spec


def catalog_filter_paginated(
    skip: int,
    take: int,
    brand: str | None = None,
    type: str | None = None,
) -> Specification[CatalogItem]:
    return catalog_filter(brand=brand, type=type).paginate(skip=skip, take=take)
