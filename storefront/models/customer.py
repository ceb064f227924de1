from storefront.extensions import db
from storefront.models.base import BaseModel


class Customer(db.Model, BaseModel):
    __tablename__ = "customers"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    name = db.Column(db.String(255), nullable=True, default="")
    phone = db.Column(db.String(50), nullable=True)
