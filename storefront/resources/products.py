from storefront.api.filtering import FilterOperator as Op
from storefront.api.router import Resource, create_crud_router
from storefront.api.whitelist import FieldWhitelist
from storefront.db.repository import BaseRepository
from storefront.models import Product
from storefront.resources.common import timestamp_columns, timestamp_filters
from storefront.schemas.products import ProductCreate, ProductRead, ProductUpdate

PRODUCT_COLUMNS = {
    "id": Product.id,
    "name": Product.name,
    "price": Product.price,
    "description": Product.description,
    "categoryId": Product.category_id,
    **timestamp_columns(Product),
}

PRODUCT_WHITELIST = FieldWhitelist.build(
    filters={
        "id": [Op.EQ],
        "name": [Op.EQ, Op.NE, Op.LIKE],
        "price": [Op.EQ, Op.NE, Op.GT, Op.GTE, Op.LT, Op.LTE],
        "categoryId": [Op.EQ, Op.NE],
        **timestamp_filters(),
    },
    sorts=["id", "name", "price", "createdAt", "updatedAt"],
)

product_repository = BaseRepository(Product, PRODUCT_COLUMNS)

products = Resource(
    name="Product",
    plural="products",
    path="/products",
    repository=product_repository,
    whitelist=PRODUCT_WHITELIST,
    read_schema=ProductRead,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
)

router = create_crud_router(products)
