"""Validation helpers for Docker Cleaner."""
from __future__ import annotations

import re
from typing import Any, List, Tuple

MAX_IDENTIFIER_LENGTH = 255


class DeleteRequestError(ValueError):
    """Raised when a bulk delete body cannot be interpreted."""


def sanitize_string(value: str, max_length: int = 255) -> str:
    """Sanitize string input."""
    if not value:
        return ""
    value = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', str(value))
    return value[:max_length].strip()


def validate_identifier(identifier: Any) -> Tuple[bool, str]:
    """Validate a single container/image/network id or volume name.

    The value is never rewritten: anything sanitize_string would change is
    rejected instead.
    """
    if not isinstance(identifier, str):
        return False, "Identifier must be a string"
    if not identifier:
        return False, "Identifier is required"
    if sanitize_string(identifier, max_length=MAX_IDENTIFIER_LENGTH) != identifier:
        return False, "Identifier contains whitespace, control characters or is too long"
    return True, ""


def parse_delete_body(data: Any, field: str) -> List[Any]:
    """Extract the identifier list from a delete request body, unchanged."""
    if not isinstance(data, dict):
        raise DeleteRequestError("Request body must be a JSON object")
    identifiers = data.get(field)
    if identifiers is None:
        raise DeleteRequestError(f"Missing required field: {field}")
    if not isinstance(identifiers, list):
        raise DeleteRequestError(f"{field} must be a list")
    return list(identifiers)
