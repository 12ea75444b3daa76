"""
Noteful API — Custom Exception Hierarchy
=========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Services raise these instead of building HTTP responses, and the
       global handlers in main.py map each type to a status code and a
       consistent JSON body.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError            → 400 Bad Request (client can fix)
    ├── UnprocessableEntityError   → 422 Unprocessable Entity (user fields)
    ├── NotFoundError              → 404 Not Found
    └── DatabaseError              → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when client input fails a business rule.

    When:    Missing title/name, malformed ObjectId, unknown folder or tag
             reference, duplicate folder/tag/user name.
    HTTP:    400 Bad Request

    Schema-level type errors (e.g. a numeric title) never reach the services;
    FastAPI rejects those with 422 before the route runs.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnprocessableEntityError(NotefulError):
    """
    Raised by the user registration checks.

    HTTP:    422 Unprocessable Entity

    Example response:
        {
            "code": 422,
            "reason": "ValidationError",
            "message": "Missing field",
            "location": "username"
        }
    """

    def __init__(
        self,
        message: str,
        location: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["location"] = location
        super().__init__(message=message, context=ctx)
        self.location = location


class NotFoundError(NotefulError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE with a well-formed id that matches nothing.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NotefulError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the context is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
