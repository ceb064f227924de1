# coding: utf8
from flask import Blueprint
from flask_restx import Api

from storefront.api.contact import ns as contact_ns
from storefront.api.order import ns as order_ns
from storefront.api.product import ns as product_ns
from storefront.api.setting import ns as setting_ns
from storefront.errors.handler import api_error_handler

bp = Blueprint("api", __name__, url_prefix="/api")

api = Api(
    bp, version="1.0", title="Storefront API", description="Storefront API", doc="/docs/"
)
api.errorhandler(Exception)(api_error_handler)


api.add_namespace(ns=order_ns)
api.add_namespace(ns=product_ns)
api.add_namespace(ns=contact_ns)
api.add_namespace(ns=setting_ns)
