"""
Book Model

Represents a book document in the `books` collection:

    {"_id": ObjectId("..."), "title": "The Hobbit", "author": ObjectId("...")}

`author` holds the _id of an Author document (an ObjectId, or its hex
string when written by another client), or is missing/null.
Nothing checks that the referenced author exists.
"""

from dataclasses import dataclass
from typing import Any

from bson import ObjectId

from catalog_api.models.author import Author

BOOK_COLLECTION = "books"


@dataclass
class Book:
    """
    Book model mapped from a MongoDB document.

    Fields:
    - id: hex string of the document's ObjectId
    - title: book title
    - author_id: hex string of the referenced author, or None
    - author: the referenced Author once populated (see
      services/relations.py); None until then, or when the reference
      is dangling
    """

    id: str
    title: str | None
    author_id: str | None = None
    author: Author | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Book":
        author_ref = document.get("author")
        return cls(
            id=str(document["_id"]),
            title=document.get("title"),
            author_id=str(author_ref) if author_ref is not None else None,
        )

    @staticmethod
    def new_document(title: str, author_id: ObjectId | None) -> dict[str, Any]:
        """Document to insert for a new book (the store assigns _id)."""
        return {"title": title, "author": author_id}

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author_id={self.author_id})"
