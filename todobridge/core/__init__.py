"""Core functionality module."""

from todobridge.core.constants import FormattingConstants
from todobridge.core.validation import is_valid_uuid, require_non_empty

__all__ = [
    "FormattingConstants",
    "is_valid_uuid",
    "require_non_empty",
]
