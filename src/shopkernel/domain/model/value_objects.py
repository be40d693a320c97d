"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shopkernel.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency, backed by Decimal."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    @property
    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def _require(value: str | None, label: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} is required")
    return str(value).strip()


@dataclass(frozen=True)
class Address:
    """Shipping address. ``state`` is optional; everything else is required."""

    street: str
    city: str
    state: str | None
    country: str
    zip_code: str

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "street", _require(self.street, "Street"))
        object.__setattr__(self, "city", _require(self.city, "City"))
        object.__setattr__(self, "country", _require(self.country, "Country"))
        object.__setattr__(self, "zip_code", _require(self.zip_code, "Zip code"))
        state = self.state.strip() if self.state else None
        object.__setattr__(self, "state", state or None)

    def __str__(self) -> str:
        region = f"{self.city}, {self.state}" if self.state else self.city
        return f"{self.street}, {region} {self.zip_code}, {self.country}"


@dataclass(frozen=True)
class CatalogItemOrdered:
    """Point-in-time copy of a catalog item, stored with an order line.

    Later edits to (or removal of) the catalog item never reach this copy,
    so historical orders keep showing what the buyer ordered.
    """

    catalog_item_id: int
    product_name: str
    picture_uri: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.catalog_item_id, int) or self.catalog_item_id <= 0:
            raise ValidationError(
                f"Catalog item id must be a positive integer, got {self.catalog_item_id!r}"
            )
        object.__setattr__(self, "product_name", _require(self.product_name, "Product name"))
        object.__setattr__(self, "picture_uri", self.picture_uri or "")
