"""
Catalog API Application Package

A small HTTP API over two related catalog entities, authors and books,
stored in a MongoDB document database.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: MongoDB client wrapper and the request dependency
- exceptions.py: Error taxonomy mapped to HTTP status codes
- main.py: FastAPI application factory, lifespan and exception handlers
- dependencies.py: Dependency injection aliases (database, path ids)
- models/: Document <-> Python model mapping
- schemas/: Pydantic response schemas
- routers/: API route handlers
- services/: Seeding and relationship population
"""

__version__ = "0.1.0"
