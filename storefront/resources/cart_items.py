from storefront.api.router import Resource, create_crud_router
from storefront.api.whitelist import FieldWhitelist, ID_OPERATORS, QUANTITY_OPERATORS
from storefront.db.repository import BaseRepository
from storefront.models import CartItem
from storefront.resources.common import ID_FILTER, timestamp_columns, timestamp_filters
from storefront.schemas.cart_items import CartItemCreate, CartItemRead, CartItemUpdate

CART_ITEM_COLUMNS = {
    "id": CartItem.id,
    "cartId": CartItem.cart_id,
    "productId": CartItem.product_id,
    "quantity": CartItem.quantity,
    **timestamp_columns(CartItem),
}

CART_ITEM_WHITELIST = FieldWhitelist.build(
    filters={
        **ID_FILTER,
        "cartId": ID_OPERATORS,
        "productId": ID_OPERATORS,
        "quantity": QUANTITY_OPERATORS,
        **timestamp_filters(),
    },
    sorts=CART_ITEM_COLUMNS.keys(),
)

cart_item_repository = BaseRepository(CartItem, CART_ITEM_COLUMNS)

cart_items = Resource(
    name="CartItem",
    plural="cart items",
    path="/cart-items",
    repository=cart_item_repository,
    whitelist=CART_ITEM_WHITELIST,
    read_schema=CartItemRead,
    create_schema=CartItemCreate,
    update_schema=CartItemUpdate,
)

router = create_crud_router(cart_items)
