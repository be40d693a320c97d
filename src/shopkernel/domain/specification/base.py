"""Specification — a declarative description of a query.

A specification states *what* a caller wants from a repository: which
aggregates (criteria), which related collections must come with them
(includes), in what order, and which page. It never runs anything; a
persistence adapter reads these fields and executes them against its store.

Specifications are immutable. Builder methods return a new instance, so a
standard specification can be refined by a caller without affecting others::

    spec = catalog_filter(brand="Azure").paginate(skip=0, take=10)

Standard specifications are built by the small factory functions in the
sibling modules rather than by subclassing.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar

from shopkernel.domain.exceptions import ValidationError

T = TypeVar("T")

Criterion = Callable[[T], bool]
SortKey = Callable[[T], Any]


@dataclass(frozen=True)
class Specification(Generic[T]):
    criteria: tuple[Criterion, ...] = ()
    includes: tuple[str, ...] = ()
    sort_key: SortKey | None = None
    descending: bool = False
    skip: int | None = None
    take: int | None = None

    # --- Builders -------------------------------------------------------------

    def where(self, criterion: Criterion) -> Specification[T]:
        return replace(self, criteria=self.criteria + (criterion,))

    def include(self, *relations: str) -> Specification[T]:
        new = tuple(r for r in relations if r not in self.includes)
        return replace(self, includes=self.includes + new)

    def order_by(self, key: SortKey, descending: bool = False) -> Specification[T]:
        return replace(self, sort_key=key, descending=descending)

    def paginate(self, skip: int, take: int) -> Specification[T]:
        if skip < 0:
            raise ValidationError("Pagination skip cannot be negative")
        if take <= 0:
            raise ValidationError("Pagination take must be positive")
        return replace(self, skip=skip, take=take)

    def without_paging(self) -> Specification[T]:
        """Same filter, no window. Used for total counts of a paged query."""
        return replace(self, skip=None, take=None)

    # --- Composition ----------------------------------------------------------

    def __and__(self, other: Specification[T]) -> Specification[T]:
        """Combine two specifications; both sets of criteria must hold.

        Ordering and paging come from the left operand, falling back to the
        right one where the left has none.
        """
        combined = self
        for criterion in other.criteria:
            combined = combined.where(criterion)
        combined = combined.include(*other.includes)
        if combined.sort_key is None and other.sort_key is not None:
            combined = combined.order_by(other.sort_key, other.descending)
        if combined.take is None and other.take is not None:
            combined = replace(combined, skip=other.skip, take=other.take)
        return combined

    # --- Introspection --------------------------------------------------------

    @property
    def is_paged(self) -> bool:
        return self.take is not None

    def is_satisfied_by(self, candidate: T) -> bool:
        """True when *candidate* meets every criterion (ignores paging)."""
        return all(criterion(candidate) for criterion in self.criteria)
