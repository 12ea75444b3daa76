"""
Noteful API — API Routes Package
=================================

Route Inventory:
    - notes.py:    GET/POST /api/notes, GET/PUT/DELETE /api/notes/{id}
    - folders.py:  GET/POST /api/folders, GET/PUT/DELETE /api/folders/{id}
    - tags.py:     GET/POST /api/tags, GET/PUT/DELETE /api/tags/{id}
    - users.py:    POST /api/users
    - health.py:   GET /health

Routes stay thin: read the request, call a service, set status and headers.
"""
