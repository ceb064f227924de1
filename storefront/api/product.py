# coding: utf8
from flask import request
from flask_restx import Namespace, Resource

from storefront import const
from storefront.errors.exceptions import NotFound
from storefront.lib.response import Response
from storefront.services.product import ProductService

ns = Namespace(name="products", description="Product catalog API")


@ns.route("")
class ProductListApi(Resource):
    def get(self):
        data_search = {
            "page": request.args.get("page", const.DEFAULT_PAGE, type=int),
            "per_page": request.args.get("per_page", const.DEFAULT_PER_PAGE, type=int),
            "search_key": request.args.get("search_key", "", type=str).strip(),
        }
        products = ProductService.get_products(data_search)
        return Response(
            data=[product._to_json() for product in products.items],
            total=products.total,
            page=products.page,
            per_page=products.per_page,
            total_pages=products.pages,
        ).to_dict()


@ns.route("/<string:reference>")
class ProductDetailApi(Resource):
    def get(self, reference):
        product = ProductService.find_product_by_reference(reference)
        if not product or not product.is_active:
            raise NotFound(message=f"Product not found: {reference}")
        return Response(data=product._to_json()).to_dict()
