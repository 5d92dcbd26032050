"""
Authors Router

Read-only endpoints for authors:

- GET /authors                      all authors
- GET /authors/{author_id}          one author
- GET /authors/{author_id}/books    the author's books, author populated
"""

from typing import List

from fastapi import APIRouter

from catalog_api.dependencies import AuthorObjectId, Database
from catalog_api.exceptions import AuthorNotFoundError
from catalog_api.models import Author, Book
from catalog_api.schemas import AuthorResponse, BookResponse, ErrorResponse
from catalog_api.services.relations import populate_authors

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed author id"},
        503: {"model": ErrorResponse, "description": "Document store unavailable"},
    },
)


def get_author_or_404(db: Database, author_id: AuthorObjectId) -> Author:
    """Get an author by ObjectId or raise AuthorNotFoundError (404)."""
    document = db.authors.find_one({"_id": author_id})
    if document is None:
        raise AuthorNotFoundError()
    return Author.from_document(document)


@router.get(
    "",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get every author in the catalog.",
)
def list_authors(db: Database) -> List[AuthorResponse]:
    """List all authors."""
    authors = [Author.from_document(doc) for doc in db.authors.find()]
    return [AuthorResponse.model_validate(a) for a in authors]


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    responses={404: {"model": ErrorResponse, "description": "Author not found"}},
)
def get_author(author_id: AuthorObjectId, db: Database) -> AuthorResponse:
    """Get a single author by ID."""
    author = get_author_or_404(db, author_id)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="Get all books written by a specific author.",
    responses={404: {"model": ErrorResponse, "description": "Author not found"}},
)
def get_author_books(author_id: AuthorObjectId, db: Database) -> List[BookResponse]:
    """
    Get all books by a specific author.

    The author is looked up first so an unknown id is a 404 rather than
    an empty list. Each book is returned with that author populated,
    the same shape GET /books returns.
    """
    author = get_author_or_404(db, author_id)

    # References written by other clients may hold the hex string form
    query = {"author": {"$in": [author_id, str(author_id)]}}
    books = [Book.from_document(doc) for doc in db.books.find(query)]
    populate_authors(db, books, known=[author])

    return [BookResponse.model_validate(book) for book in books]
