"""
Noteful API — Middleware Package
=================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation id stored in a ContextVar and echoed back
    2. Logging: one access line per request, tagged with the request id
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
