from app.cart import Cart
from app.discounts import DiscountApplicationStrategy
from app.function import run

from conftest import variant_line


def cart(*lines):
    return Cart.model_validate({"lines": list(lines)})


def test_empty_cart():
    resp = run(cart())
    assert resp.discounts == []
    assert resp.discount_application_strategy is DiscountApplicationStrategy.MAXIMUM


def test_quantity_twelve_gets_top_tier(schedule):
    (d,) = run(cart(variant_line(12, schedule))).discounts
    assert d.percent == 20.0
    assert d.message == "20% off 10+"


def test_quantity_seven_gets_first_tier(schedule):
    (d,) = run(cart(variant_line(7, schedule))).discounts
    assert d.percent == 10.0
    assert d.message == "10% off 5+"


def test_quantity_three_gets_nothing(schedule):
    assert run(cart(variant_line(3, schedule))).discounts == []


def test_invalid_config_gets_nothing():
    assert run(cart(variant_line(1000, "not valid json"))).discounts == []


def test_only_qualifying_line_emitted(schedule):
    resp = run(cart(
        variant_line(2, schedule, variant_id="small"),
        variant_line(6, schedule, variant_id="big"),
    ))
    assert [d.target_id for d in resp.discounts] == ["big"]
    assert resp.discount_application_strategy is DiscountApplicationStrategy.MAXIMUM


def test_mixed_merchandise(schedule):
    resp = run(cart(
        variant_line(20, schedule, variant_id="a"),
        {"quantity": 50, "merchandise": {"__typename": "CustomProduct"}},
        variant_line(20, variant_id="unconfigured"),
        variant_line(5, schedule, variant_id="b"),
    ))
    assert [(d.target_id, d.percent) for d in resp.discounts] == [("a", 20.0), ("b", 10.0)]


def test_at_most_one_discount_per_line(schedule):
    lines = [variant_line(q, schedule, variant_id=f"v{q}") for q in range(1, 15)]
    resp = run(cart(*lines))
    targets = [d.target_id for d in resp.discounts]
    assert len(targets) == len(set(targets))
    assert targets == [f"v{q}" for q in range(5, 15)]


def test_line_order_does_not_change_results(schedule):
    lines = [variant_line(q, schedule, variant_id=f"v{q}") for q in (3, 12, 7)]
    forward = {d.target_id: d for d in run(cart(*lines)).discounts}
    backward = {d.target_id: d for d in run(cart(*reversed(lines))).discounts}
    assert forward == backward
