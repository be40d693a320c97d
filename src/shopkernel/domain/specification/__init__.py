"""Specifications used by the kernel's workflows and query handlers."""

from shopkernel.domain.specification.base import Specification
from shopkernel.domain.specification.basket_specs import (
    basket_with_items,
    basket_with_items_by_buyer,
)
from shopkernel.domain.specification.catalog_specs import (
    catalog_filter,
    catalog_filter_paginated,
    catalog_items_by_ids,
)
from shopkernel.domain.specification.order_specs import (
    customer_orders_with_items,
    order_with_items_by_id,
)

__all__ = [
    "Specification",
    "basket_with_items",
    "basket_with_items_by_buyer",
    "catalog_filter",
    "catalog_filter_paginated",
    "catalog_items_by_ids",
    "customer_orders_with_items",
    "order_with_items_by_id",
]
