"""
SQLAlchemy models of the storefront.

Importing this package registers every table on ``storefront.db.metadata``.
"""

from storefront.models.cart_items import CartItem
from storefront.models.carts import Cart
from storefront.models.categories import Category
from storefront.models.order_items import OrderItem
from storefront.models.orders import Order
from storefront.models.products import Product
from storefront.models.users import User

__all__ = [
    "User",
    "Category",
    "Product",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
]
