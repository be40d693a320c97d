"""Basket aggregate — what a buyer intends to purchase.

The Basket owns its line items. Outside code sees an immutable tuple of
``BasketItem`` values; every change goes through a Basket method, which is
where the consolidation and quantity invariants are enforced.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from shopkernel.domain.exceptions import ValidationError
from shopkernel.domain.model.value_objects import Money


@dataclass(frozen=True)
class BasketItem:
    """One basket line.

    ``unit_price`` is the price seen when the item was first added; it does
    not follow later catalog price changes.
    """

    catalog_item_id: int
    unit_price: Money
    quantity: int

    @property
    def key(self) -> str:
        """Line key used by callers to address this line."""
        return str(self.catalog_item_id)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class Basket:
    """Aggregate root for a buyer's basket.

    Invariants:
    - at most one line per catalog item
    - line quantities are never negative
    """

    def __init__(
        self,
        buyer_id: str,
        id: int | None = None,
        items: Iterable[BasketItem] = (),
    ) -> None:
        self.id = id
        self.buyer_id = buyer_id
        self._items: list[BasketItem] = list(items)

    @staticmethod
    def create(buyer_id: str) -> Basket:
        """Create an empty basket for a buyer."""
        return Basket(buyer_id=normalize_buyer_id(buyer_id))

    def __repr__(self) -> str:
        return f"Basket(id={self.id!r}, buyer_id={self.buyer_id!r}, items={self.items!r})"

    # --- Read-only view -------------------------------------------------------

    @property
    def items(self) -> tuple[BasketItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    def find_item(self, catalog_item_id: int) -> BasketItem | None:
        for item in self._items:
            if item.catalog_item_id == catalog_item_id:
                return item
        return None

    # --- Mutations ------------------------------------------------------------

    def add_item(self, catalog_item_id: int, unit_price: Money, quantity: int = 1) -> None:
        """Add a catalog item, merging into an existing line when there is one."""
        if not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be positive")
        if not unit_price.is_positive:
            raise ValidationError("Unit price must be greater than zero")

        index = self._index_of(catalog_item_id)
        if index is None:
            self._items.append(
                BasketItem(
                    catalog_item_id=catalog_item_id,
                    unit_price=unit_price,
                    quantity=quantity,
                )
            )
            return

        existing = self._items[index]
        self._items[index] = replace(existing, quantity=existing.quantity + quantity)

    def set_quantity(self, catalog_item_id: int, quantity: int) -> None:
        """Set a line's quantity. Zero marks the line for ``remove_empty_items``."""
        if not isinstance(quantity, int) or quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        index = self._index_of(catalog_item_id)
        if index is None:
            raise ValidationError(
                f"Catalog item {catalog_item_id} is not in basket {self.id}"
            )
        self._items[index] = replace(self._items[index], quantity=quantity)

    def remove_empty_items(self) -> None:
        self._items = [item for item in self._items if item.quantity > 0]

    def set_new_buyer_id(self, buyer_id: str) -> None:
        self.buyer_id = normalize_buyer_id(buyer_id)

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, catalog_item_id: int) -> int | None:
        for i, item in enumerate(self._items):
            if item.catalog_item_id == catalog_item_id:
                return i
        return None


def normalize_buyer_id(buyer_id: str | None) -> str:
    """Strip a buyer id, rejecting a blank one. Baskets are keyed on the result."""
    if not buyer_id or not buyer_id.strip():
        raise ValidationError("Buyer id is required")
    return buyer_id.strip()
