"""
API Routers Package

Router Structure:
- authors.py: /authors/* endpoints
- books.py: /books endpoint

Each router is imported and registered in main.py.
"""

from catalog_api.routers.authors import router as authors_router
from catalog_api.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
