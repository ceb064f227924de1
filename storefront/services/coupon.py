from storefront.extensions import db
from storefront.lib.logger import log as logger
from storefront.lib.string import to_decimal
from storefront.models.coupon import Coupon, CouponUsage


class CouponService:

    @staticmethod
    def find_coupon_by_code(code):
        if not code:
            return None
        return Coupon.query.filter(Coupon.code == code).first()

    @staticmethod
    def link_coupon_usage(order, code, discount_amount, customer_id=None):
        """Record that ``code`` discounted ``order``.

        Best effort and committed separately from the order: any failure is
        logged, rolled back and reported as ``None``. Nothing is recorded for a
        zero discount or an unknown code.
        """
        discount = to_decimal(discount_amount)
        if not code or discount <= 0:
            return None

        try:
            coupon = CouponService.find_coupon_by_code(code)
            if not coupon:
                logger.warning(f"Coupon {code} not found, usage not recorded")
                return None

            coupon.used_count = Coupon.used_count + 1
            usage = CouponUsage(
                coupon_id=coupon.id,
                order_id=order.id,
                customer_id=customer_id,
                discount_amount=discount,
            )
            db.session.add(usage)
            db.session.commit()
            return usage
        except Exception as e:
            db.session.rollback()
            logger.error(f"Coupon linking error for {code}: {e}")
            return None
