"""
pytest Fixtures for Catalog API Tests

This file contains shared fixtures used across all test files.

The document store is replaced by mongomock, an in-memory implementation
of the pymongo API. Each test gets a fresh client, so tests never see
each other's documents and no MongoDB server is needed.

The app is built with create_app(settings, database): the test database
is injected directly instead of being opened from MONGO_URL.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app so the module-level
# app never tries to seed a real database.
import os

os.environ["RESET_DATABASE"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"

from collections.abc import Generator

import mongomock
import pytest
from fastapi.testclient import TestClient

from catalog_api.config import Settings
from catalog_api.database import CatalogDatabase
from catalog_api.main import create_app
from catalog_api.models import Author, Book


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def mongo_client() -> mongomock.MongoClient:
    """In-memory MongoDB client, fresh for each test."""
    return mongomock.MongoClient()


@pytest.fixture
def database(mongo_client) -> CatalogDatabase:
    """CatalogDatabase backed by the in-memory client."""
    return CatalogDatabase(mongo_client, "books_test")


@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, reset_database=False)


# =============================================================================
# CLIENT FIXTURES
# =============================================================================
@pytest.fixture
def client(
    test_settings: Settings,
    database: CatalogDatabase,
) -> Generator[TestClient, None, None]:
    """
    Test client over an empty catalog.

    Entering the TestClient context runs the app's lifespan, exactly as
    uvicorn would on startup.
    """
    app = create_app(test_settings, database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(
    test_settings: Settings,
    database: CatalogDatabase,
) -> Generator[TestClient, None, None]:
    """Test client whose startup seeded the demo catalog (RESET_DATABASE=true)."""
    settings = test_settings.model_copy(update={"reset_database": True})
    app = create_app(settings, database)
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(database: CatalogDatabase) -> Author:
    """Insert a single author."""
    result = database.authors.insert_one(Author.new_document("George Orwell"))
    return Author(id=str(result.inserted_id), name="George Orwell")


@pytest.fixture
def sample_book(database: CatalogDatabase, sample_author: Author) -> Book:
    """Insert a book written by sample_author."""
    author_oid = database.authors.find_one({"name": sample_author.name})["_id"]
    result = database.books.insert_one(Book.new_document("1984", author_oid))
    return Book(
        id=str(result.inserted_id),
        title="1984",
        author_id=sample_author.id,
        author=sample_author,
    )


@pytest.fixture
def rowling_id(seeded_client: TestClient) -> str:
    """Id of the seeded J.K. Rowling author."""
    authors = seeded_client.get("/authors").json()
    return next(a["id"] for a in authors if a["name"] == "J.K. Rowling")
