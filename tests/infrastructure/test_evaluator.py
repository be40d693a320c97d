"""Tests for in-memory specification evaluation."""

import pytest

from shopkernel.domain.specification import Specification
from shopkernel.infrastructure.persistence.evaluator import SpecificationEvaluator

NUMBERS = [5, 3, 8, 1, 9, 2]


class TestSpecificationEvaluator:

    def test_no_spec_returns_everything(self):
        assert SpecificationEvaluator().evaluate(NUMBERS, None) == NUMBERS

    def test_filter_order_then_page(self):
        spec = (
            Specification()
            .where(lambda n: n > 1)
            .order_by(lambda n: n, descending=True)
            .paginate(skip=1, take=2)
        )
        assert SpecificationEvaluator().evaluate(NUMBERS, spec) == [8, 5]

    def test_unordered_filter_keeps_source_order(self):
        spec = Specification().where(lambda n: n % 2 == 1)
        assert SpecificationEvaluator().evaluate(NUMBERS, spec) == [5, 3, 1, 9]

    def test_count_ignores_paging(self):
        spec = Specification().where(lambda n: n > 2).paginate(skip=0, take=1)
        assert SpecificationEvaluator().count(NUMBERS, spec) == 4

    def test_known_include_accepted(self):
        spec = Specification().include("items")
        assert SpecificationEvaluator(["items"]).evaluate([1], spec) == [1]

    def test_unknown_include_rejected(self):
        with pytest.raises(ValueError, match="Unknown include path"):
            SpecificationEvaluator(["items"]).evaluate([1], Specification().include("buyer"))
