"""
Middleware module for the storefront API.

Provides centralized setup for the CORS and request logging middleware.
"""

from storefront.middleware.manager import setup_middlewares
from storefront.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["setup_middlewares", "RequestLoggingMiddleware"]
