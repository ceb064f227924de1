# coding: utf8
from flask_restx import Namespace, Resource

from storefront.decorators import parameters
from storefront.lib.logger import log as logger, order_logger
from storefront.lib.response import Response
from storefront.services.coupon import CouponService
from storefront.services.order import OrderService
from storefront.services.order_notification import OrderNotificationService

ns = Namespace(name="order", path="/", description="Order intake API")

NULLABLE_STRING = {"type": ["string", "null"]}
MAX_AMOUNT = 9999999999.99
AMOUNT = {"type": "number", "minimum": 0, "maximum": MAX_AMOUNT}

CREATE_ORDER_SCHEMA = dict(
    type="object",
    properties={
        "customer": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "email": {"type": "string", "minLength": 3},
                "phone": {"type": "string", "minLength": 1},
                "alternativePhone": NULLABLE_STRING,
                "city": {"type": "string", "minLength": 1},
                "address": {"type": "string", "minLength": 1},
                "landmark": NULLABLE_STRING,
                "notes": NULLABLE_STRING,
                "coords": {
                    "type": ["object", "null"],
                    "properties": {"lat": {"type": "number"}, "lng": {"type": "number"}},
                    "required": ["lat", "lng"],
                },
            },
            "required": ["name", "email", "phone", "city", "address"],
        },
        "items": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": ["string", "integer"]},
                    "name": {"type": "string"},
                    "qty": {"type": "integer", "minimum": 1},
                    "price": AMOUNT,
                    "image": NULLABLE_STRING,
                },
                "required": ["id", "name", "qty", "price"],
            },
        },
        "summary": {
            "type": "object",
            "properties": {
                "subtotal": AMOUNT,
                "deliveryFee": AMOUNT,
                "total": AMOUNT,
                "discountAmount": {
                    "type": ["number", "null"],
                    "minimum": 0,
                    "maximum": MAX_AMOUNT,
                },
                "belowMinimum": {"type": ["boolean", "null"]},
            },
            "required": ["subtotal", "deliveryFee", "total"],
        },
        "paymentScreenshot": NULLABLE_STRING,
        "cashOnDelivery": {"type": ["boolean", "null"]},
        "couponCode": NULLABLE_STRING,
    },
    required=["customer", "items", "summary"],
)


@ns.route("/create-order")
class APICreateOrder(Resource):

    @parameters(**CREATE_ORDER_SCHEMA)
    def post(self, args):
        customer = args["customer"]
        items = args["items"]
        summary = args["summary"]
        payment_screenshot = args.get("paymentScreenshot") or None
        cash_on_delivery = bool(args.get("cashOnDelivery"))
        coupon_code = args.get("couponCode") or None

        try:
            order = OrderService.create_order(
                customer,
                items,
                summary,
                payment_screenshot=payment_screenshot,
                cash_on_delivery=cash_on_delivery,
            )
        except Exception as e:
            logger.error(f"Database error while creating order: {e}")
            return Response(
                ok=False, error="Failed to save order to database", status=500
            ).to_dict()

        log = order_logger(order.order_number)
        log.info(f"Order saved with {len(items)} item(s)")

        CouponService.link_coupon_usage(
            order,
            coupon_code,
            summary.get("discountAmount") or 0,
            customer_id=order.customer_id,
        )

        try:
            OrderNotificationService.notify(
                order,
                customer,
                items,
                payment_screenshot=payment_screenshot,
                cash_on_delivery=cash_on_delivery,
            )
        except Exception as e:
            log.error(f"Order notifications aborted: {e}")

        return Response().to_dict()
