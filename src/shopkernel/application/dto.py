"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopkernel.domain.model.basket import Basket
from shopkernel.domain.model.catalog import CatalogItem
from shopkernel.domain.model.order import Order


@dataclass(frozen=True)
class CatalogItemDTO:
    id: int
    name: str
    price: str
    brand: str
    type: str
    picture_uri: str


@dataclass(frozen=True)
class CatalogPageDTO:
    items: list[CatalogItemDTO]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, -(-self.total_items // self.page_size))


@dataclass(frozen=True)
class BasketLineDTO:
    catalog_item_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class BasketDTO:
    id: int
    buyer_id: str
    items: list[BasketLineDTO]
    total_items: int
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line as displayed to the user."""

    catalog_item_id: int
    product_name: str
    picture_uri: str
    units: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    buyer_id: str
    order_date: str
    ship_to: str
    items: list[OrderLineDTO]
    total: str


@dataclass(frozen=True)
class OrderSummaryDTO:
    id: int
    order_date: str
    lines: int
    total: str


# --- Mapping ------------------------------------------------------------------


def _format_date(order: Order) -> str:
    return order.order_date.strftime("%Y-%m-%d %H:%M UTC")


def catalog_item_to_dto(item: CatalogItem) -> CatalogItemDTO:
    return CatalogItemDTO(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        price=str(item.price),
        brand=item.brand,
        type=item.type,
        picture_uri=item.picture_uri,
    )


def basket_to_dto(basket: Basket) -> BasketDTO:
    return BasketDTO(
        id=basket.id,  # type: ignore[arg-type]
        buyer_id=basket.buyer_id,
        items=[
            BasketLineDTO(
                catalog_item_id=item.catalog_item_id,
                quantity=item.quantity,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in basket.items
        ],
        total_items=basket.total_items,
        total=str(basket.total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        buyer_id=order.buyer_id,
        order_date=_format_date(order),
        ship_to=str(order.ship_to_address),
        items=[
            OrderLineDTO(
                catalog_item_id=item.item_ordered.catalog_item_id,
                product_name=item.item_ordered.product_name,
                picture_uri=item.item_ordered.picture_uri,
                units=item.units,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
    )


def order_to_summary(order: Order) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        id=order.id,  # type: ignore[arg-type]
        order_date=_format_date(order),
        lines=len(order.items),
        total=str(order.total),
    )
