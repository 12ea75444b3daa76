"""
Noteful API — User Route Handlers
==================================

What:  POST /api/users (registration).
Why an untyped body: the field checks must see non-string values, and a
       missing or non-object body, and report them as 422 with a `location`
       in the order UserService defines, instead of FastAPI's generic schema
       error.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.config import settings
from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse, FieldErrorResponse
from noteful.schemas.user import UserResponse
from noteful.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Users"])


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {"description": "Username already exists", "model": ErrorResponse},
        422: {"description": "Field validation failed", "model": FieldErrorResponse},
    },
    summary="Register a user",
)
async def create_user(
    request: Request,
    response: Response,
    body: Any = Body(
        default=None,
        examples=[{"fullname": "Ada Lovelace", "username": "ada", "password": "analytical"}],
    ),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    result = await user_service.create_user(db, body)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result
