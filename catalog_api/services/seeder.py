"""
Database Seeder

Resets the catalog to a fixed demo data set:

- 2 authors: J.R.R. Tolkien, J.K. Rowling
- 5 books, each referencing one of them

Used in two places:
1. Application startup when RESET_DATABASE=true (see main.py lifespan)
2. scripts/seed_data.py from the command line

WARNING: seeding deletes every document in both collections first.
There is no confirmation and no backup. Running it twice leaves the
store with the same 2 authors and 5 books (new _ids each time).
"""

import logging
from dataclasses import dataclass

from catalog_api.database import CatalogDatabase
from catalog_api.models import Author, Book

logger = logging.getLogger(__name__)

SEED_AUTHORS = ["J.R.R. Tolkien", "J.K. Rowling"]

# (title, author name)
SEED_BOOKS = [
    ("Harry Potter and the Philosopher's Stone", "J.K. Rowling"),
    ("Harry Potter and the Chamber of Secrets", "J.K. Rowling"),
    ("Harry Potter and the Prisoner of Azkaban", "J.K. Rowling"),
    ("The Lord of the Rings", "J.R.R. Tolkien"),
    ("The Hobbit", "J.R.R. Tolkien"),
]


@dataclass
class SeedResult:
    """Counts of what the seeder removed and inserted."""

    authors_deleted: int
    books_deleted: int
    authors: int
    books: int


def clear_data(db: CatalogDatabase) -> tuple[int, int]:
    """Delete every author and book. Returns the deleted counts."""
    authors_deleted = db.authors.delete_many({}).deleted_count
    books_deleted = db.books.delete_many({}).deleted_count
    logger.info(
        f"Cleared {authors_deleted} authors and {books_deleted} books"
    )
    return authors_deleted, books_deleted


def seed_database(db: CatalogDatabase) -> SeedResult:
    """
    Clear both collections and insert the demo catalog.

    Inserts run one at a time, in order, each awaiting the previous one,
    so every book can reference an author _id captured from its insert.

    Store errors are not caught here: the caller decides whether a failed
    seed aborts startup. Inserts already made are not rolled back.

    Args:
        db: The catalog database to reset

    Returns:
        SeedResult with deleted and inserted counts
    """
    logger.info("Resetting database!")
    authors_deleted, books_deleted = clear_data(db)

    author_ids = {}
    for name in SEED_AUTHORS:
        result = db.authors.insert_one(Author.new_document(name))
        author_ids[name] = result.inserted_id

    for title, author_name in SEED_BOOKS:
        db.books.insert_one(Book.new_document(title, author_ids[author_name]))

    result = SeedResult(
        authors_deleted=authors_deleted,
        books_deleted=books_deleted,
        authors=len(author_ids),
        books=len(SEED_BOOKS),
    )
    logger.info(f"Seeded {result.authors} authors and {result.books} books")
    return result
