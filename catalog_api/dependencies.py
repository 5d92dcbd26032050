"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Type Aliases with Annotated
===========================
Instead of writing:
    def get_author(db: CatalogDatabase = Depends(get_db)):

You can write:
    def get_author(db: Database, author_id: AuthorObjectId):
"""

from typing import Annotated

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends, Path

from catalog_api.database import CatalogDatabase, get_db
from catalog_api.exceptions import InvalidIdentifierError

Database = Annotated[CatalogDatabase, Depends(get_db)]


# =============================================================================
# Path Identifiers
# =============================================================================
def parse_object_id(value: str, entity: str = "author") -> ObjectId:
    """
    Convert a 24-character hex string into an ObjectId.

    Raises:
        InvalidIdentifierError: If the value is not a valid ObjectId,
            which the API reports as 400 Bad Request
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(value, entity) from exc


def get_author_object_id(
    author_id: str = Path(
        ...,
        description="Author identifier (24 hex characters)",
        examples=["65f0c2a4e13b4f0d9c1a2b3c"],
    ),
) -> ObjectId:
    """Parse the {author_id} path parameter before the handler runs."""
    return parse_object_id(author_id, "author")


AuthorObjectId = Annotated[ObjectId, Depends(get_author_object_id)]
