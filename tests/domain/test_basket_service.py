"""Tests for the BasketService domain service (in-memory fakes)."""

import pytest

from shopkernel.domain.exceptions import EntityNotFoundError, PersistenceError, ValidationError
from shopkernel.domain.model.basket import Basket
from shopkernel.domain.model.value_objects import Money
from shopkernel.domain.service.basket_service import BasketService
from shopkernel.domain.specification import basket_with_items_by_buyer
from tests.fakes import FakeBasketRepository


def _setup(*baskets: Basket) -> tuple[BasketService, FakeBasketRepository]:
    repo = FakeBasketRepository(baskets)
    return BasketService(repo), repo


def _basket_of(repo: FakeBasketRepository, buyer_id: str) -> Basket | None:
    return repo.first_matching(basket_with_items_by_buyer(buyer_id))


class FailingBasketRepository(FakeBasketRepository):
    """Accepts its seed baskets, then fails every write."""

    def __init__(self, *baskets: Basket) -> None:
        self.failing = False
        super().__init__(baskets)
        self.failing = True

    def add(self, entity: Basket) -> Basket:
        if self.failing:
            raise PersistenceError("disk full")
        return super().add(entity)

    def update(self, entity: Basket) -> None:
        if self.failing:
            raise PersistenceError("disk full")
        super().update(entity)


def _basket(buyer_id: str, *lines: tuple[int, str, int]) -> Basket:
    basket = Basket.create(buyer_id)
    for catalog_item_id, price, qty in lines:
        basket.add_item(catalog_item_id, Money.of(price), qty)
    return basket


class TestAddItemToBasket:

    def test_creates_basket_for_new_buyer(self):
        service, repo = _setup()
        basket = service.add_item_to_basket("alice", 42, Money.of("9.99"), 1)

        assert basket.id is not None
        stored = repo.get_by_id(basket.id)
        assert stored.buyer_id == "alice"
        assert [(i.catalog_item_id, i.unit_price, i.quantity) for i in stored.items] == [
            (42, Money.of("9.99"), 1)
        ]

    def test_second_add_consolidates(self):
        service, repo = _setup()
        service.add_item_to_basket("alice", 42, Money.of("9.99"), 1)
        service.add_item_to_basket("alice", 42, Money.of("9.99"), 2)

        assert repo.count_matching() == 1
        stored = _basket_of(repo, "alice")
        assert [(i.catalog_item_id, i.unit_price, i.quantity) for i in stored.items] == [
            (42, Money.of("9.99"), 3)
        ]

    def test_each_buyer_gets_own_basket(self):
        service, repo = _setup()
        first = service.add_item_to_basket("alice", 1, Money.of("1.00"))
        second = service.add_item_to_basket("bob", 1, Money.of("1.00"))
        assert first.id != second.id
        assert repo.count_matching() == 2

    def test_invalid_item_creates_nothing(self):
        service, repo = _setup()
        with pytest.raises(ValidationError):
            service.add_item_to_basket("alice", 1, Money.of("1.00"), 0)
        assert repo.count_matching() == 0

    def test_blank_buyer_rejected(self):
        service, repo = _setup()
        with pytest.raises(ValidationError, match="Buyer id"):
            service.add_item_to_basket("", 1, Money.of("1.00"))
        assert repo.writes == 0

    def test_padded_buyer_id_finds_the_same_basket(self):
        service, repo = _setup()
        service.add_item_to_basket(" alice", 42, Money.of("9.99"), 1)
        service.add_item_to_basket(" alice", 42, Money.of("9.99"), 2)
        service.add_item_to_basket("alice ", 42, Money.of("9.99"), 1)

        assert repo.count_matching() == 1
        stored = _basket_of(repo, "alice")
        assert [(i.catalog_item_id, i.quantity) for i in stored.items] == [(42, 4)]
        assert service.count_total_basket_items(" alice ") == 4

    def test_storage_failure_on_new_basket_surfaces(self):
        repo = FailingBasketRepository()
        service = BasketService(repo)
        with pytest.raises(PersistenceError, match="disk full"):
            service.add_item_to_basket("alice", 42, Money.of("9.99"))
        assert repo.count_matching() == 0

    def test_storage_failure_on_existing_basket_surfaces(self):
        repo = FailingBasketRepository(_basket("alice", (42, "9.99", 1)))
        service = BasketService(repo)
        with pytest.raises(PersistenceError, match="disk full"):
            service.add_item_to_basket("alice", 42, Money.of("9.99"), 2)
        assert _basket_of(repo, "alice").items[0].quantity == 1


class TestSetQuantities:

    def test_updates_and_removes_empty_lines(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1), (6, "2.00", 1)))
        basket = service.set_quantities(1, {"5": 0, "6": 4})

        stored = repo.get_by_id(1)
        assert [(i.catalog_item_id, i.quantity) for i in stored.items] == [(6, 4)]
        assert basket.total_items == 4

    def test_unknown_keys_ignored(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1)))
        service.set_quantities(1, {"999": 3})
        assert repo.get_by_id(1).items[0].quantity == 1

    def test_missing_basket(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Basket #3 not found"):
            service.set_quantities(3, {"5": 1})

    def test_negative_quantity_persists_nothing(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1)))
        writes = repo.writes
        with pytest.raises(ValidationError):
            service.set_quantities(1, {"5": -2})
        assert repo.writes == writes
        assert repo.get_by_id(1).items[0].quantity == 1


class TestDeleteBasket:

    def test_deletes(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1)))
        service.delete_basket(1)
        assert repo.get_by_id(1) is None

    def test_missing_basket(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            service.delete_basket(1)


class TestTransferBasket:

    def test_no_anonymous_basket_is_a_no_op(self):
        service, repo = _setup()
        service.transfer_basket("anon-1", "alice")
        assert repo.count_matching() == 0
        assert repo.writes == 0

    def test_reassigns_owner(self):
        service, repo = _setup(_basket("anon-1", (5, "10.00", 2)))
        service.transfer_basket("anon-1", "alice")

        assert _basket_of(repo, "anon-1") is None
        stored = _basket_of(repo, "alice")
        assert stored.id == 1
        assert stored.items[0].quantity == 2

    def test_merges_into_existing_user_basket(self):
        service, repo = _setup(
            _basket("alice", (5, "10.00", 1)),
            _basket("anon-1", (5, "10.00", 2), (6, "3.00", 1)),
        )
        service.transfer_basket("anon-1", "alice")

        assert repo.count_matching() == 1
        stored = _basket_of(repo, "alice")
        assert [(i.catalog_item_id, i.quantity) for i in stored.items] == [(5, 3), (6, 1)]

    def test_padded_user_name_merges_into_existing_basket(self):
        service, repo = _setup(
            _basket("bob", (5, "10.00", 1)),
            _basket("anon-1", (5, "10.00", 2)),
        )
        service.transfer_basket(" anon-1", "bob ")

        assert repo.count_matching() == 1
        stored = _basket_of(repo, "bob")
        assert stored.id == 1
        assert stored.items[0].quantity == 3

    def test_padded_same_id_is_a_no_op(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1)))
        service.transfer_basket("alice", " alice ")
        assert repo.writes == 1

    def test_same_id_is_a_no_op(self):
        service, repo = _setup(_basket("alice", (5, "10.00", 1)))
        service.transfer_basket("alice", "alice")
        assert _basket_of(repo, "alice").items[0].quantity == 1

    def test_blank_user_rejected(self):
        service, repo = _setup(_basket("anon-1", (5, "10.00", 1)))
        with pytest.raises(ValidationError, match="Buyer id"):
            service.transfer_basket("anon-1", " ")
        assert _basket_of(repo, "anon-1") is not None


class TestBasketQueries:

    def test_get_or_create_creates_once(self):
        service, repo = _setup()
        first = service.get_or_create_basket_for_user("alice")
        second = service.get_or_create_basket_for_user("alice")
        assert first.id == second.id
        assert repo.count_matching() == 1

    def test_count_total_basket_items(self):
        service, _ = _setup(_basket("alice", (5, "10.00", 2), (6, "1.00", 3)))
        assert service.count_total_basket_items("alice") == 5
        assert service.count_total_basket_items("nobody") == 0
