"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from shopkernel.domain.service.basket_service import BasketService
from shopkernel.domain.service.order_service import OrderService
from shopkernel.infrastructure.persistence.json_basket_repository import (
    JsonBasketRepository,
)
from shopkernel.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from shopkernel.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

DATA_DIR_ENV = "SHOPKERNEL_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.getenv(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def catalog_repository() -> JsonCatalogRepository:
    return JsonCatalogRepository(data_dir() / "catalog.json")


def basket_repository() -> JsonBasketRepository:
    return JsonBasketRepository(data_dir() / "baskets.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def basket_service() -> BasketService:
    return BasketService(basket_repository())


def order_service() -> OrderService:
    return OrderService(
        order_repo=order_repository(),
        basket_repo=basket_repository(),
        catalog_repo=catalog_repository(),
    )
