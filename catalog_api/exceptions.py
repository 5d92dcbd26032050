"""
Catalog API Exceptions

Every failure a handler can hit is classified into one of these errors.
main.py registers a single exception handler that renders them as:

    HTTP <status_code>
    {"error": "<message>"}

Error Taxonomy:
===============
- NotFoundError (404): a well-formed id that matches no document
- InvalidIdentifierError (400): an id that is not a valid ObjectId
- StoreUnavailableError (503): the document store failed or is unreachable
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for errors rendered as {"error": message}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An internal error occurred."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class AuthorNotFoundError(NotFoundError):
    message = "Author not found"


class InvalidIdentifierError(CatalogError):
    """Raised when a path id cannot be parsed into an ObjectId."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, value: str, entity: str = "author") -> None:
        self.value = value
        super().__init__(f"Invalid {entity} id: {value}")


class StoreUnavailableError(CatalogError):
    """Raised (or mapped from pymongo errors) when the store cannot answer."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Document store unavailable"
