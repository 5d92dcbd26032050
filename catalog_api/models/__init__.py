"""
Document Models Package

Plain Python models for the documents stored in MongoDB.

Model Relationships:
- Book -> Author: Many-to-One (a book stores the _id of its author in
                  its `author` field; an author can have many books)

The store does not enforce the reference: deleting an author leaves its
books pointing at a missing _id. Those books are returned with no author.

Import from here:
    from catalog_api.models import Author, Book
"""

from catalog_api.models.author import AUTHOR_COLLECTION, Author
from catalog_api.models.book import BOOK_COLLECTION, Book

__all__ = [
    "AUTHOR_COLLECTION",
    "BOOK_COLLECTION",
    "Author",
    "Book",
]
