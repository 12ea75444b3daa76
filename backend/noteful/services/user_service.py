"""
Noteful API — User Service
===========================

What:  Registration of new users.
How:   Field checks run in a fixed order and stop at the first failure,
       which is reported as a 422 with the offending field as `location`:

           1. required fields present        (username, password)
           2. string types                   (username, password, fullname)
           3. no leading/trailing whitespace (username, password)
           4. minimum lengths                (username ≥ 1, password ≥ 8)
           5. maximum lengths                (password ≤ 72)

       The password is hashed with passlib before it is stored, and the
       response never includes it.
"""

import logging
from typing import Any, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, UnprocessableEntityError, ValidationError
from noteful.models.user import User
from noteful.schemas.user import UserResponse
from noteful.security import hash_password

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullname")
TRIMMED_FIELDS = ("username", "password")
FIELD_SIZES = {
    "username": {"min": 1},
    # 72 is the bcrypt input limit; kept so hashes stay portable
    "password": {"min": 8, "max": 72},
}


def validate_user_fields(body: Any) -> Tuple[str, str, str]:
    """
    Check a registration body and return (username, password, fullname).

    Raises:
        UnprocessableEntityError: first failing rule, with its field as location
    """
    if not isinstance(body, dict):
        # No JSON object at all: every field is missing
        body = {}

    for field in REQUIRED_FIELDS:
        if body.get(field) is None:
            raise UnprocessableEntityError("Missing field", location=field)

    for field in STRING_FIELDS:
        value = body.get(field)
        if value is not None and not isinstance(value, str):
            raise UnprocessableEntityError(
                "Incorrect field type: expected string", location=field
            )

    for field in TRIMMED_FIELDS:
        if body[field].strip() != body[field]:
            raise UnprocessableEntityError(
                "Field cannot start or end with whitespace", location=field
            )

    for field, size in FIELD_SIZES.items():
        if "min" in size and len(body[field]) < size["min"]:
            raise UnprocessableEntityError(
                f"Must be at least {size['min']} characters long", location=field
            )

    for field, size in FIELD_SIZES.items():
        if "max" in size and len(body[field]) > size["max"]:
            raise UnprocessableEntityError(
                f"Must be at most {size['max']} characters long", location=field
            )

    fullname = (body.get("fullname") or "").strip()
    return body["username"], body["password"], fullname


class UserService:
    async def create_user(self, db: AsyncSession, body: Any) -> UserResponse:
        """
        Register a user.

        Raises:
            UnprocessableEntityError: Field checks failed (→ 422)
            ValidationError: Username already taken (→ 400)
            DatabaseError: Insert failed for another reason (→ 500)
        """
        username, password, fullname = validate_user_fields(body)
        try:
            user = User(
                username=username,
                password=hash_password(password),
                fullname=fullname,
            )
            db.add(user)
            await db.flush()
            logger.info("User created: %s (%s)", user.id, username)
            return UserResponse.model_validate(user)

        except IntegrityError:
            raise ValidationError(message="The username already exists", field="username")
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the user. Please try again.",
                context={"error_type": type(e).__name__},
            )


user_service = UserService()
