"""Order aggregate — a placed, immutable purchase.

An Order is built once, from a basket, and never changes afterwards: the
dataclasses are frozen and the items are held in a tuple. Every order line
carries its own catalog snapshot and price so the order reads the same no
matter what happens to the catalog later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from shopkernel.domain.exceptions import ValidationError
from shopkernel.domain.model.value_objects import Address, CatalogItemOrdered, Money


@dataclass(frozen=True)
class OrderItem:
    """A single order line: snapshot + price + units, locked at creation."""

    item_ordered: CatalogItemOrdered
    unit_price: Money
    units: int

    def __post_init__(self) -> None:
        if not isinstance(self.units, int) or self.units <= 0:
            raise ValidationError("Order item units must be positive")
        if not self.unit_price.is_positive:
            raise ValidationError("Order item unit price must be greater than zero")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.units


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` for new orders; it enforces all invariants.
    The constructor is left plain so repositories can reconstitute stored
    orders without re-validating.
    """

    id: int | None
    buyer_id: str
    ship_to_address: Address
    items: tuple[OrderItem, ...]
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        buyer_id: str,
        ship_to_address: Address,
        items: Iterable[OrderItem],
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not buyer_id or not buyer_id.strip():
            raise ValidationError("Buyer id is required")

        if not isinstance(ship_to_address, Address):
            raise ValidationError("Shipping address is required")

        items = tuple(items)
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            id=None,
            buyer_id=buyer_id.strip(),
            ship_to_address=ship_to_address,
            items=items,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def total_units(self) -> int:
        return sum(item.units for item in self.items)
