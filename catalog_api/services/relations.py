"""
Relationship Population

Books store only the _id of their author. Before a book is returned,
its `author` field is replaced with the full Author ("populated").

All referenced authors are loaded with a single $in query and joined in
memory, so listing N books costs two queries, not N + 1.

References stored as ObjectIds and as hex strings resolve alike.
A reference that matches no author (the author was deleted; nothing
cascades) leaves book.author as None.
"""

from collections.abc import Iterable

from bson import ObjectId

from catalog_api.database import CatalogDatabase
from catalog_api.models import Author, Book


def populate_authors(
    db: CatalogDatabase,
    books: list[Book],
    known: Iterable[Author] = (),
) -> list[Book]:
    """
    Fill in book.author for every book in the list.

    Args:
        db: The catalog database
        books: Books to populate (modified in place)
        known: Authors already loaded by the caller; these are not fetched
            again

    Returns:
        The same list of books
    """
    authors_by_id = {author.id: author for author in known}

    missing = {
        book.author_id
        for book in books
        if book.author_id is not None and book.author_id not in authors_by_id
    }
    if missing:
        ids = [
            ObjectId(author_id)
            for author_id in missing
            if ObjectId.is_valid(author_id)
        ]
        cursor = db.authors.find({"_id": {"$in": ids}})
        for document in cursor:
            author = Author.from_document(document)
            authors_by_id[author.id] = author

    for book in books:
        if book.author_id is not None:
            book.author = authors_by_id.get(book.author_id)

    return books
