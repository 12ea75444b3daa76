"""
Noteful API — Services Package
===============================

Business logic lives here, independent of HTTP concerns:
    - note_service.py:        notes CRUD, filters and text search
    - named_item_service.py:  folders and tags CRUD
    - user_service.py:        user registration
    - search.py:              searchTerm → SQL filter/score expressions
    - validation.py:          id and required-field checks
"""
