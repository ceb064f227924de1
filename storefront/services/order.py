from flask import current_app

from storefront import const
from storefront.extensions import db
from storefront.lib.string import generate_order_number, to_decimal
from storefront.models.order import Order, OrderItem, OrderStatusHistory
from storefront.services.customer import CustomerService
from storefront.services.product import ProductService


class OrderService:
    """Persistence side of order intake."""

    @staticmethod
    def payment_method(cash_on_delivery):
        return const.PAYMENT_METHOD_COD if cash_on_delivery else const.PAYMENT_METHOD_PREPAID

    @staticmethod
    def payment_label(cash_on_delivery, payment_screenshot):
        if cash_on_delivery:
            return const.PAYMENT_LABEL_COD
        if payment_screenshot:
            return const.PAYMENT_LABEL_SCREENSHOT
        return const.PAYMENT_LABEL_PREPAID

    @staticmethod
    def build_order_items(items):
        """Map cart lines to ``OrderItem`` rows.

        Raises ``ProductNotFound`` for the first line that matches neither a
        product id nor a slug, before anything is added to the session.
        """
        order_items = []
        for item in items:
            product_id = ProductService.resolve_product_id(item.get("id"))
            unit_price = to_decimal(item["price"])
            quantity = int(item["qty"])
            order_items.append(
                OrderItem(
                    product_id=product_id,
                    product_name=item["name"],
                    product_image_url=item.get("image") or None,
                    variation_name=None,
                    quantity=quantity,
                    unit_price=unit_price,
                    discount_amount=to_decimal(0),
                    total_price=to_decimal(unit_price * quantity),
                )
            )
        return order_items

    @staticmethod
    def create_order(
        customer,
        items,
        summary,
        payment_screenshot=None,
        cash_on_delivery=False,
    ):
        """Write the order, its items and the opening status entry in a single
        commit. On any error the session is rolled back and the error is
        re-raised."""
        try:
            existing_customer = CustomerService.find_customer_by_email(
                customer.get("email")
            )
            order_items = OrderService.build_order_items(items)

            order = Order(
                order_number=generate_order_number(
                    current_app.config.get("ORDER_NUMBER_PREFIX") or "TSF"
                ),
                customer_id=existing_customer.id if existing_customer else None,
                customer_name=customer["name"],
                customer_email=customer["email"],
                customer_phone=customer["phone"],
                customer_alternative_phone=customer.get("alternativePhone") or None,
                customer_city=customer["city"],
                customer_address=customer["address"],
                customer_landmark=customer.get("landmark") or None,
                customer_coordinates=customer.get("coords") or None,
                customer_notes=customer.get("notes") or None,
                payment_screenshot=payment_screenshot or None,
                subtotal=to_decimal(summary["subtotal"]),
                delivery_fee=to_decimal(summary["deliveryFee"]),
                discount_amount=to_decimal(summary.get("discountAmount") or 0),
                tax_amount=to_decimal(0),
                total_amount=to_decimal(summary["total"]),
                status=const.ORDER_STATUS_PENDING,
                payment_status=(
                    const.PAYMENT_STATUS_PENDING
                    if cash_on_delivery
                    else const.PAYMENT_STATUS_PAID
                ),
                payment_method=OrderService.payment_method(cash_on_delivery),
                items=order_items,
                status_history=[
                    OrderStatusHistory(
                        status=const.ORDER_STATUS_PENDING,
                        notes=const.ORDER_CREATED_NOTE,
                    )
                ],
            )
            db.session.add(order)
            db.session.commit()
            return order
        except Exception:
            db.session.rollback()
            raise
