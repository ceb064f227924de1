from storefront.extensions import db
from storefront.models.base import BaseModel


class Coupon(db.Model, BaseModel):
    __tablename__ = "coupons"

    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(50), nullable=False, unique=True, index=True)
    name = db.Column(db.String(250), nullable=False, default="")
    discount_type = db.Column(db.String(20), nullable=False, default="PERCENT")
    value = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    used_count = db.Column(db.Integer, nullable=False, default=0)
    max_uses = db.Column(db.Integer, nullable=True)
    is_active = db.Column(db.Boolean, default=True)
    expires_at = db.Column(db.DateTime, nullable=True)


class CouponUsage(db.Model, BaseModel):
    __tablename__ = "coupon_usages"

    id = db.Column(db.Integer, primary_key=True)
    coupon_id = db.Column(db.Integer, db.ForeignKey("coupons.id"), nullable=False)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False)
    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=True)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    coupon = db.relationship("Coupon", lazy="joined")
