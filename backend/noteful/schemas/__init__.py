"""
Noteful API — Pydantic Request/Response Schemas
================================================

Schemas are separate from the SQLAlchemy models: they decide which fields are
exposed and under which JSON names (camelCase on the wire, snake_case in
Python).
"""
