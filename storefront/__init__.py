"""
Storefront: a FastAPI commerce backend with filterable, sortable and
paginated list endpoints over a generic SQLAlchemy repository.
"""

__version__ = "0.1.0"
