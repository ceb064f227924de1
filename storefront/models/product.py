import uuid

from storefront.extensions import db
from storefront.models.base import BaseModel


class Product(db.Model, BaseModel):
    __tablename__ = "products"

    id = db.Column(
        db.String(36), primary_key=True, default=lambda: uuid.uuid4().hex
    )
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    price = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    image_url = db.Column(db.String(500), nullable=True)
    stock_qty = db.Column(db.Integer, default=0)
    is_active = db.Column(db.Boolean, default=True)
