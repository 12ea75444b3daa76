"""Request checks shared by the note, folder and tag services."""

from typing import Any, Optional

from noteful.exceptions import ValidationError
from noteful.ids import is_valid_object_id


def require_object_id(value: Any, field: str = "id") -> str:
    """
    Return the id in its stored (lowercase) form, or raise 400 if it is not
    a 24-hex id. Ids are case-insensitive on the wire.
    """
    if not is_valid_object_id(value):
        raise ValidationError(message=f"The `{field}` is not valid", field=field)
    return value.lower()


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise 400 if it is missing or blank."""
    if value is None or not value.strip():
        raise ValidationError(message=f"Missing `{field}` in request body", field=field)
    return value.strip()
