from .product import Product
from .customer import Customer
from .order import Order, OrderItem, OrderStatusHistory
from .coupon import Coupon, CouponUsage
from .setting import Setting

__all__ = [
    "Product",
    "Customer",
    "Order",
    "OrderItem",
    "OrderStatusHistory",
    "Coupon",
    "CouponUsage",
    "Setting",
]
