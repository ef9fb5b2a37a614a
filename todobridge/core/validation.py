"""Input validation helpers shared by the bridge and the front-end."""

import uuid

from todobridge.exceptions import ValidationError


def is_valid_uuid(value: str) -> bool:
    """Check whether a string parses as a UUID."""
    try:
        uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def require_non_empty(field: str, value: str | None) -> str:
    """Return the value if it is a non-blank string.

    Raises:
        ValidationError: If the value is missing or blank

    """
    if value is None or not value.strip():
        raise ValidationError(field, value, f"{field} must not be empty")
    return value


def require_uuid(field: str, value: str) -> str:
    """Return the value if it is a valid UUID string.

    Raises:
        ValidationError: If the value is not a UUID

    """
    if not is_valid_uuid(value):
        raise ValidationError(field, value, f"{field} '{value}' is not a valid UUID")
    return value
