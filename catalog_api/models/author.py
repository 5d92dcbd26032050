"""
Author Model

Represents an author document in the `authors` collection:

    {"_id": ObjectId("..."), "name": "J.R.R. Tolkien"}

The _id is generated by the store on insert. Authors are never updated
in place; they are only removed by a bulk reset.
"""

from dataclasses import dataclass
from typing import Any

AUTHOR_COLLECTION = "authors"


@dataclass
class Author:
    """
    Author model mapped from a MongoDB document.

    `id` is the hex string form of the document's ObjectId, which is what
    the API returns and accepts in URLs.

    Example:
        author = Author.from_document({"_id": ObjectId(), "name": "J.K. Rowling"})
        author.id  # '65f0c2...'
    """

    id: str
    name: str | None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Author":
        return cls(id=str(document["_id"]), name=document.get("name"))

    @staticmethod
    def new_document(name: str) -> dict[str, Any]:
        """Document to insert for a new author (the store assigns _id)."""
        return {"name": name}

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"
