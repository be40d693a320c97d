"""In-memory evaluation of specifications.

Used by the JSON repositories (and the test fakes), which hold whole
documents in memory. Applies filter, then ordering, then the paging window.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, TypeVar

from shopkernel.domain.specification.base import Specification

T = TypeVar("T")


class SpecificationEvaluator:

    def __init__(self, known_includes: Iterable[str] = ()) -> None:
        self._known_includes = frozenset(known_includes)

    def evaluate(self, candidates: Iterable[T], spec: Specification[T] | None) -> list[T]:
        if spec is None:
            return list(candidates)

        self.check_includes(spec)
        selected = [c for c in candidates if spec.is_satisfied_by(c)]

        if spec.sort_key is not None:
            selected.sort(key=spec.sort_key, reverse=spec.descending)

        if spec.is_paged:
            start = spec.skip or 0
            selected = list(islice(selected, start, start + spec.take))

        return selected

    def count(self, candidates: Iterable[T], spec: Specification[T] | None) -> int:
        if spec is None:
            return sum(1 for _ in candidates)
        return len(self.evaluate(candidates, spec.without_paging()))

    def check_includes(self, spec: Specification[T]) -> None:
        """Reject eager-load paths this store does not know about."""
        unknown = [name for name in spec.includes if name not in self._known_includes]
        if unknown:
            raise ValueError(f"Unknown include path(s): {', '.join(unknown)}")
