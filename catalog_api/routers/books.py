"""
Books Router

- GET /books    every book, each with its author populated
"""

from typing import List

from fastapi import APIRouter

from catalog_api.dependencies import Database
from catalog_api.models import Book
from catalog_api.schemas import BookResponse, ErrorResponse
from catalog_api.services.relations import populate_authors

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        503: {"model": ErrorResponse, "description": "Document store unavailable"},
    },
)


@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description=(
        "Get every book in the catalog. The author reference is expanded "
        "into the full author so clients need no second request."
    ),
)
def list_books(db: Database) -> List[BookResponse]:
    """List all books with their authors."""
    books = [Book.from_document(doc) for doc in db.books.find()]
    populate_authors(db, books)
    return [BookResponse.model_validate(book) for book in books]
