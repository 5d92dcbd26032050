"""
Database Configuration Module

This module wraps the MongoDB client used by the Catalog API.

Connection Lifecycle
====================
There is no module-level client. A CatalogDatabase is constructed
explicitly by the application lifespan (see main.py), stored on
app.state.database, and closed on shutdown:

1. Startup → CatalogDatabase.from_settings(settings)
2. Requests → get_db(request) hands the same instance to every handler
3. Shutdown → database.close()

We're using the SYNCHRONOUS pymongo driver because route handlers are
plain `def` functions: FastAPI runs them in its threadpool, so a slow store
call never blocks the event loop. MongoClient is thread-safe and keeps its
own connection pool, so a single instance is shared by all requests.

Tests pass a mongomock client to the constructor instead of connecting
to a real server.
"""

import logging

from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from catalog_api.config import Settings
from catalog_api.models.author import AUTHOR_COLLECTION
from catalog_api.models.book import BOOK_COLLECTION

logger = logging.getLogger(__name__)


class CatalogDatabase:
    """
    Handle on the catalog's MongoDB database.

    Exposes the two collections the API works with:
    - authors: {_id, name}
    - books: {_id, title, author: <author _id>}

    Example:
        database = CatalogDatabase(MongoClient("mongodb://localhost"), "books")
        database.authors.find_one({"name": "J.K. Rowling"})
        database.close()
    """

    def __init__(self, client: MongoClient, name: str) -> None:
        self.client = client
        self.name = name
        self.db: Database = client[name]

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogDatabase":
        """
        Create a client from the configured connection string.

        MongoClient connects lazily, so this never blocks on the network.
        The database name is taken from the connection string path
        (mongodb://host/<name>) and falls back to settings.mongo_database.
        """
        client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
        name = client.get_default_database(settings.mongo_database).name
        logger.info(f"Using MongoDB database '{name}'")
        return cls(client, name)

    @property
    def authors(self) -> Collection:
        return self.db[AUTHOR_COLLECTION]

    @property
    def books(self) -> Collection:
        return self.db[BOOK_COLLECTION]

    def ping(self) -> bool:
        """
        Check that the server is reachable.

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        self.client.admin.command("ping")
        return True

    def close(self) -> None:
        """Close all pooled connections."""
        self.client.close()

    def __repr__(self) -> str:
        return f"CatalogDatabase(name='{self.name}')"


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> CatalogDatabase:
    """
    Database dependency for FastAPI.

    Returns the CatalogDatabase opened by the application lifespan.

    Usage in Routes:
        @router.get("/authors")
        def list_authors(db: Database):
            ...
    """
    return request.app.state.database
