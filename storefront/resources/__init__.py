"""
HTTP resources of the storefront.

Each module defines an entity's column mapping, list whitelist, repository
and router. ``routers`` lists them in mounting order.
"""

from storefront.resources import cart_items, categories, order_items, products, users

routers = [
    users.router,
    categories.router,
    products.router,
    cart_items.router,
    order_items.router,
]

__all__ = ["routers"]
