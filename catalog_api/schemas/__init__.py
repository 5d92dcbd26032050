"""
Pydantic Schemas Package

Response models for the Catalog API.

WHY Separate Schemas from Document Models?
==========================================
1. Control exactly what is exposed (no raw ObjectIds, no internal fields)
2. Documentation: Schemas generate the OpenAPI documentation
3. The stored document shape can evolve independently of the API
"""

from catalog_api.schemas.author import AuthorResponse
from catalog_api.schemas.book import BookResponse
from catalog_api.schemas.error import ErrorResponse

__all__ = [
    "AuthorResponse",
    "BookResponse",
    "ErrorResponse",
]
