from storefront import const
from storefront.extensions import db
from storefront.models.base import BaseModel


class Order(db.Model, BaseModel):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(50), nullable=False, index=True)
    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=True)

    customer_name = db.Column(db.String(255), nullable=False)
    customer_email = db.Column(db.String(255), nullable=False)
    customer_phone = db.Column(db.String(50), nullable=False)
    customer_alternative_phone = db.Column(db.String(50), nullable=True)
    customer_city = db.Column(db.String(255), nullable=False)
    customer_address = db.Column(db.Text, nullable=False)
    customer_landmark = db.Column(db.String(255), nullable=True)
    customer_coordinates = db.Column(db.JSON, nullable=True)
    customer_notes = db.Column(db.Text, nullable=True)
    payment_screenshot = db.Column(db.String(500), nullable=True)

    subtotal = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    delivery_fee = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    tax_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    status = db.Column(db.String(30), nullable=False, default=const.ORDER_STATUS_PENDING)
    payment_status = db.Column(
        db.String(30), nullable=False, default=const.PAYMENT_STATUS_PENDING
    )
    payment_method = db.Column(db.String(50), nullable=True)

    customer = db.relationship("Customer", lazy="joined")
    items = db.relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan"
    )
    status_history = db.relationship(
        "OrderStatusHistory",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderStatusHistory.id",
    )


class OrderItem(db.Model, BaseModel):
    __tablename__ = "order_items"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False)
    product_id = db.Column(db.String(36), db.ForeignKey("products.id"), nullable=False)
    product_name = db.Column(db.String(255), nullable=False)
    product_image_url = db.Column(db.String(500), nullable=True)
    variation_name = db.Column(db.String(255), nullable=True)
    quantity = db.Column(db.Integer, nullable=False)
    unit_price = db.Column(db.Numeric(12, 2), nullable=False)
    discount_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total_price = db.Column(db.Numeric(12, 2), nullable=False)

    order = db.relationship("Order", back_populates="items")
    product = db.relationship("Product")


class OrderStatusHistory(db.Model, BaseModel):
    __tablename__ = "order_status_histories"

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False)
    status = db.Column(db.String(30), nullable=False)
    notes = db.Column(db.Text, nullable=True)

    order = db.relationship("Order", back_populates="status_history")
