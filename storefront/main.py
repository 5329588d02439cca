"""
ASGI entry point.

    uvicorn storefront.main:app
"""

from storefront.factory import create_app

app = create_app()
