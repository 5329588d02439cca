from storefront.api.router import Resource, create_crud_router
from storefront.api.whitelist import FieldWhitelist, ID_OPERATORS, QUANTITY_OPERATORS
from storefront.db.repository import BaseRepository
from storefront.models import OrderItem
from storefront.resources.common import ID_FILTER, timestamp_columns, timestamp_filters
from storefront.schemas.order_items import OrderItemCreate, OrderItemRead, OrderItemUpdate

ORDER_ITEM_COLUMNS = {
    "id": OrderItem.id,
    "orderId": OrderItem.order_id,
    "productId": OrderItem.product_id,
    "quantity": OrderItem.quantity,
    **timestamp_columns(OrderItem),
}

ORDER_ITEM_WHITELIST = FieldWhitelist.build(
    filters={
        **ID_FILTER,
        "orderId": ID_OPERATORS,
        "productId": ID_OPERATORS,
        "quantity": QUANTITY_OPERATORS,
        **timestamp_filters(),
    },
    sorts=ORDER_ITEM_COLUMNS.keys(),
)

order_item_repository = BaseRepository(OrderItem, ORDER_ITEM_COLUMNS)

order_items = Resource(
    name="OrderItem",
    plural="order items",
    path="/order-items",
    repository=order_item_repository,
    whitelist=ORDER_ITEM_WHITELIST,
    read_schema=OrderItemRead,
    create_schema=OrderItemCreate,
    update_schema=OrderItemUpdate,
)

router = create_crud_router(order_items)
