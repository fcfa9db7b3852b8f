import dataclasses

import pytest

from orderprice import Order, OrderRecord, PricedOrder
from orderprice.errors import InvalidOrderError, MissingOrderFieldError


def test_order_exposes_record_fields():
    record = {"quantity": 400, "itemPrice": 1}
    order = Order.from_record(record)

    assert order.quantity == record["quantity"]
    assert order.item_price == record["itemPrice"]
    assert order.price == pytest.approx(440)


def test_from_record_accepts_typed_record():
    order = Order.from_record(OrderRecord(quantity=1000, itemPrice=1))

    assert order == Order(quantity=1000, item_price=1)
    assert order.price == pytest.approx(1075)


@pytest.mark.parametrize(
    "quantity, item_price, expected",
    [
        (400, 1, 440),
        (1, 2000, 2100),
        (1000, 1, 1075),
    ],
)
def test_order_price_matches_calculator(quantity, item_price, expected):
    assert Order(quantity=quantity, item_price=item_price).price == pytest.approx(expected)


def test_order_is_immutable_value():
    order = Order(400, 1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        order.quantity = 10
    assert order == Order.from_record({"quantity": 400, "item_price": 1})
    assert hash(order) == hash(Order(400, 1))


def test_order_breakdown_and_protocol():
    order = Order(600, 2)

    assert isinstance(order, PricedOrder)
    assert order.breakdown.discount == pytest.approx(10)
    assert order.breakdown.total == order.price


def test_order_rejects_invalid_fields_at_construction():
    with pytest.raises(InvalidOrderError):
        Order(quantity=-5, item_price=1)
    with pytest.raises(InvalidOrderError):
        Order(quantity=5, item_price=float("nan"))


def test_from_record_requires_both_fields():
    with pytest.raises(MissingOrderFieldError):
        Order.from_record({"quantity": 5})
    with pytest.raises(MissingOrderFieldError):
        Order.from_record({"itemPrice": 5})
