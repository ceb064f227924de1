from sqlalchemy import or_

from storefront import const
from storefront.errors.exceptions import ProductNotFound
from storefront.extensions import db
from storefront.models.product import Product


class ProductService:

    @staticmethod
    def find_product(id):
        return db.session.get(Product, id)

    @staticmethod
    def find_product_by_slug(slug):
        return Product.query.filter(Product.slug == slug).first()

    @staticmethod
    def find_product_by_reference(reference):
        """Primary key first, slug second."""
        if reference is None or reference == "":
            return None
        reference = str(reference)
        return ProductService.find_product(reference) or ProductService.find_product_by_slug(
            reference
        )

    @staticmethod
    def resolve_product_id(reference):
        product = ProductService.find_product_by_reference(reference)
        if not product:
            raise ProductNotFound(reference)
        return product.id

    @staticmethod
    def get_products(data_search):
        query = Product.query.filter(Product.is_active.is_(True))

        search_key = data_search.get("search_key", "")
        if search_key:
            search_pattern = f"%{search_key}%"
            query = query.filter(
                or_(
                    Product.name.ilike(search_pattern),
                    Product.description.ilike(search_pattern),
                    Product.slug.ilike(search_pattern),
                )
            )

        per_page = min(
            data_search.get("per_page") or const.DEFAULT_PER_PAGE, const.MAX_PER_PAGE
        )
        return query.order_by(Product.name.asc()).paginate(
            page=data_search.get("page") or const.DEFAULT_PAGE,
            per_page=per_page,
            error_out=False,
        )
