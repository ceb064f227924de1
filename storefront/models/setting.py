from storefront.extensions import db
from storefront.models.base import BaseModel


class Setting(db.Model, BaseModel):
    __tablename__ = "setting"

    id = db.Column(db.Integer, primary_key=True)
    setting_name = db.Column(db.String(500), nullable=False, unique=True)
    setting_value = db.Column(db.Text, nullable=True)
    status = db.Column(db.Integer, default=1)
