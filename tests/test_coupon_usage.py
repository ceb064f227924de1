from decimal import Decimal

from storefront.models import Coupon, CouponUsage, Order
from storefront.services.coupon import CouponService


def apply_coupon(payload, code, discount):
    payload["couponCode"] = code
    payload["summary"]["discountAmount"] = discount
    return payload


def test_positive_discount_records_usage_and_increments_count(
    client, order_payload, coupon
):
    response = client.post(
        "/api/create-order", json=apply_coupon(order_payload, "STARS10", 575.05)
    )

    assert response.get_json() == {"ok": True}
    order = Order.query.one()
    assert order.discount_amount == Decimal("575.05")

    usages = CouponUsage.query.all()
    assert len(usages) == 1
    assert usages[0].order_id == order.id
    assert usages[0].coupon_id == coupon.id
    assert usages[0].discount_amount == Decimal("575.05")
    assert usages[0].customer_id is None
    assert Coupon.query.filter_by(code="STARS10").one().used_count == 4


def test_usage_is_linked_to_known_customer(client, order_payload, coupon, customer):
    client.post("/api/create-order", json=apply_coupon(order_payload, "STARS10", 100))

    assert CouponUsage.query.one().customer_id == customer.id


def test_zero_discount_records_nothing(client, order_payload, coupon):
    response = client.post(
        "/api/create-order", json=apply_coupon(order_payload, "STARS10", 0)
    )

    assert response.get_json() == {"ok": True}
    assert CouponUsage.query.count() == 0
    assert Coupon.query.filter_by(code="STARS10").one().used_count == 3


def test_unknown_coupon_code_does_not_fail_order(client, order_payload, coupon):
    response = client.post(
        "/api/create-order", json=apply_coupon(order_payload, "NOPE", 50)
    )

    assert response.get_json() == {"ok": True}
    assert Order.query.count() == 1
    assert CouponUsage.query.count() == 0


def test_coupon_linking_failure_keeps_the_order(
    client, order_payload, coupon, monkeypatch
):
    def broken_lookup(code):
        raise RuntimeError("coupon table locked")

    monkeypatch.setattr(CouponService, "find_coupon_by_code", broken_lookup)

    response = client.post(
        "/api/create-order", json=apply_coupon(order_payload, "STARS10", 50)
    )

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    assert Order.query.count() == 1
    assert CouponUsage.query.count() == 0
    assert Coupon.query.filter_by(code="STARS10").one().used_count == 3


def test_link_coupon_usage_ignores_missing_code(app, order_payload):
    assert CouponService.link_coupon_usage(object(), None, 25) is None
    assert CouponService.link_coupon_usage(object(), "STARS10", 0) is None
