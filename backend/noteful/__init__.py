"""
Noteful API — Application Package Initializer
==============================================

What: Marks the `noteful` directory as a Python package.
Who:  Imported by uvicorn (`noteful.main:app`), Alembic, the seed script and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, query building
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate the request, services validate and query,
    schemas shape the JSON that goes back out.
"""

__version__ = "1.0.0"
