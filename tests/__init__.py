"""
Test Suite for Catalog API

Test Organization:
- conftest.py: Shared fixtures (in-memory store, client, sample data)
- test_root.py: Tests for / and /health
- test_authors.py: Tests for /authors endpoints
- test_books.py: Tests for /books and author population
- test_seed.py: Tests for the seeder and startup seeding
- test_errors.py: Tests for error classification
- test_config.py: Tests for settings

Running Tests:
    pytest
    pytest --cov=catalog_api --cov-report=html
    pytest tests/test_authors.py -v
"""
