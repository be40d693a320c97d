"""Generic repository contracts.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Reads that need filtering, ordering, paging or eager loading take a
``Specification``, never a raw predicate or query string. That keeps the
specification the only coupling point between the workflows and storage.
Every method may raise ``PersistenceError`` when the store itself fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

from shopkernel.domain.specification.base import Specification

T = TypeVar("T")


class ReadRepository(ABC, Generic[T]):

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Return an aggregate by its ID, or None if not found."""

    @abstractmethod
    def list_matching(self, spec: Specification[T] | None = None) -> list[T]:
        """Return every aggregate the specification selects (all when None)."""

    @abstractmethod
    def count_matching(self, spec: Specification[T] | None = None) -> int:
        """Count matching aggregates. Paging on the specification is ignored."""

    @abstractmethod
    def first_matching(self, spec: Specification[T]) -> T | None:
        """Return the first matching aggregate, or None."""


class Repository(ReadRepository[T]):

    @abstractmethod
    def add(self, entity: T) -> T:
        """Persist a new aggregate and return it with its identity assigned."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Persist changes to an existing aggregate."""

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an aggregate together with everything it owns."""

    @abstractmethod
    def delete_many(self, entities: Iterable[T]) -> None:
        """Remove several aggregates in one write."""
