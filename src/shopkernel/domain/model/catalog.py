"""CatalogItem aggregate.

Catalog items live independently of baskets and orders. Prices and
descriptions change over time; baskets and orders only ever hold the
item's id plus the fields they copied when the item was added or ordered.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopkernel.domain.exceptions import ValidationError
from shopkernel.domain.model.value_objects import Money


@dataclass
class CatalogItem:
    """A product in the catalog."""

    id: int | None
    name: str
    price: Money
    description: str = ""
    picture_uri: str = ""
    brand: str = ""
    type: str = ""

    @staticmethod
    def create(
        name: str,
        price: Money,
        description: str = "",
        picture_uri: str = "",
        brand: str = "",
        type: str = "",
    ) -> CatalogItem:
        item = CatalogItem(id=None, name="", price=Money.zero())
        item.update_details(name, description, price)
        item.update_picture_uri(picture_uri)
        item.brand = brand.strip()
        item.type = type.strip()
        return item

    def update_details(self, name: str, description: str, price: Money) -> None:
        """Change name, description and price.

        Existing orders are unaffected; they carry their own snapshot.
        """
        if not name or not name.strip():
            raise ValidationError("Catalog item name is required")
        if not price.is_positive:
            raise ValidationError("Catalog item price must be greater than zero")
        self.name = name.strip()
        self.description = (description or "").strip()
        self.price = price

    def update_price(self, new_price: Money) -> None:
        self.update_details(self.name, self.description, new_price)

    def update_picture_uri(self, picture_uri: str) -> None:
        self.picture_uri = (picture_uri or "").strip()
