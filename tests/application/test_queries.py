"""Tests for the read-side query handlers."""

from datetime import datetime, timezone

import pytest

from shopkernel.application.list_orders import ListBuyerOrdersHandler
from shopkernel.application.show_basket import ShowBasketHandler
from shopkernel.application.show_order import ShowOrderHandler
from shopkernel.domain.exceptions import EntityNotFoundError
from shopkernel.domain.model.basket import Basket
from shopkernel.domain.model.order import Order, OrderItem
from shopkernel.domain.model.value_objects import Address, CatalogItemOrdered, Money
from tests.fakes import FakeBasketRepository, FakeOrderRepository

ADDRESS = Address("123 Main St.", "Kent", "OH", "United States", "44240")


def _order(buyer_id: str, day: int, price: str = "10.00") -> Order:
    return Order(
        id=None,
        buyer_id=buyer_id,
        ship_to_address=ADDRESS,
        items=(
            OrderItem(CatalogItemOrdered(1, "Mug", "images/1.png"), Money.of(price), 2),
        ),
        order_date=datetime(2024, 1, day, 12, 0, tzinfo=timezone.utc),
    )


class TestShowOrder:

    def test_maps_order(self):
        repo = FakeOrderRepository([_order("alice", 1)])
        dto = ShowOrderHandler(repo).handle(1)
        assert dto.id == 1
        assert dto.order_date == "2024-01-01 12:00 UTC"
        assert dto.total == "$20.00"
        assert dto.items[0].product_name == "Mug"
        assert dto.items[0].line_total == "$20.00"

    def test_missing_order(self):
        with pytest.raises(EntityNotFoundError, match="Order #5 not found"):
            ShowOrderHandler(FakeOrderRepository()).handle(5)


class TestListBuyerOrders:

    def test_newest_first_and_only_own_orders(self):
        repo = FakeOrderRepository([
            _order("alice", 1),
            _order("bob", 2),
            _order("alice", 3, price="1.00"),
        ])
        summaries = ListBuyerOrdersHandler(repo).handle("alice")
        assert [s.id for s in summaries] == [3, 1]
        assert summaries[0].total == "$2.00"
        assert summaries[0].lines == 1

    def test_unknown_buyer_has_no_orders(self):
        assert ListBuyerOrdersHandler(FakeOrderRepository()).handle("nobody") == []


class TestShowBasket:

    def test_maps_basket(self):
        basket = Basket.create("alice")
        basket.add_item(3, Money.of("4.00"), 2)
        dto = ShowBasketHandler(FakeBasketRepository([basket])).handle("alice")
        assert dto.id == 1
        assert dto.total_items == 2
        assert dto.total == "$8.00"
        assert dto.items[0].unit_price == "$4.00"

    def test_no_basket(self):
        assert ShowBasketHandler(FakeBasketRepository()).handle("alice") is None
