"""
Categories, plus the listing of one category's products.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.api.dependencies import ListQuery, list_query
from storefront.api.filtering import FilterOperator as Op
from storefront.api.pagination import paginate
from storefront.api.router import Resource, create_crud_router, id_path
from storefront.api.whitelist import FieldWhitelist, TEXT_OPERATORS
from storefront.db.manager import get_db, get_session_factory
from storefront.db.repository import BaseRepository
from storefront.errors.exceptions import NotFoundError
from storefront.models import Category, Product
from storefront.resources.common import ID_FILTER, timestamp_columns, timestamp_filters
from storefront.resources.products import PRODUCT_WHITELIST, product_repository
from storefront.schemas import DataResponse, PaginatedData
from storefront.schemas.categories import CategoryCreate, CategoryRead, CategoryUpdate
from storefront.schemas.products import ProductRead

CATEGORY_COLUMNS = {
    "id": Category.id,
    "name": Category.name,
    "description": Category.description,
    **timestamp_columns(Category),
}

CATEGORY_WHITELIST = FieldWhitelist.build(
    filters={
        **ID_FILTER,
        "name": TEXT_OPERATORS,
        "description": [Op.EQ, Op.NE, Op.LIKE],
        **timestamp_filters(),
    },
    sorts=["id", "name", "description", "createdAt", "updatedAt"],
)

category_repository = BaseRepository(Category, CATEGORY_COLUMNS)

categories = Resource(
    name="Category",
    plural="categories",
    path="/categories",
    repository=category_repository,
    whitelist=CATEGORY_WHITELIST,
    read_schema=CategoryRead,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
)

router = create_crud_router(categories)


@router.get(
    "/{category_id}/products", response_model=DataResponse[PaginatedData[ProductRead]]
)
async def list_category_products(
    category_id: int = id_path(),
    query: ListQuery = Depends(list_query(PRODUCT_WHITELIST)),
    session: AsyncSession = Depends(get_db),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """List the products of one category, filtered and sorted like /products."""
    if await category_repository.get_by_id(session, category_id) is None:
        raise NotFoundError(resource_type="Category", resource_id=category_id)

    page = await paginate(
        product_repository,
        session_factory,
        query.pagination,
        query.options(where=Product.category_id == category_id),
        schema=ProductRead,
    )
    return DataResponse(data=page, message="Successfully fetched all products")
