"""
Centralized input validation rules.

Named rules shared by the admin and user paths. Each rule returns the
normalized value or raises ValidationError naming the offending field.

Dependencies: re (stdlib), micourses.core.exceptions
System role: Business-rule validation not covered by pydantic schemas
"""

import re
from datetime import date
from uuid import UUID

from micourses.core.exceptions import ValidationError

# Letters, with at most two single or double spaces between words
NAME_PATTERN = re.compile(r"^[A-Za-z]+(?: {1,2}[A-Za-z]+){0,2}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CONTACT_PATTERN = re.compile(r"^\d{10}$")
MIN_PASSWORD_LENGTH = 6
GENDERS = frozenset({"male", "female", "other"})


def validate_name(value: str | None, field: str = "names") -> str:
    """Letters only, at most two embedded single or double spaces."""
    if value is None or not NAME_PATTERN.match(value.strip()):
        raise ValidationError(
            "Names must contain letters only, with at most two spaces between words",
            field=field,
        )
    return value.strip()


def validate_email(value: str | None, field: str = "email") -> str:
    if value is None or not EMAIL_PATTERN.match(value.strip()):
        raise ValidationError("Invalid email address", field=field)
    return value.strip().lower()


def validate_contact(value: str | None, field: str = "contact") -> str:
    if value is None or not CONTACT_PATTERN.match(value.strip()):
        raise ValidationError("Contact must be exactly 10 digits", field=field)
    return value.strip()


def validate_password(value: str | None, field: str = "password") -> str:
    if value is None or len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            field=field,
        )
    return value


def validate_gender(value: str, field: str = "gender") -> str:
    normalized = value.strip().lower()
    if normalized not in GENDERS:
        raise ValidationError(
            f"Gender must be one of: {', '.join(sorted(GENDERS))}",
            field=field,
        )
    return normalized


def validate_birth_date(value: date, field: str = "dateOfBirth") -> date:
    if value >= date.today():
        raise ValidationError("Date of birth must be in the past", field=field)
    return value


def validate_required(value: str | None, field: str) -> str:
    """Reject missing and whitespace-only strings."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", field=field)
    return value.strip()


def parse_id(value: str | UUID | None, field: str = "id") -> UUID:
    """
    Parse an entity identifier.

    Args:
        value: UUID or its string form
        field: Field name reported on failure

    Returns:
        UUID: Parsed identifier

    Raises:
        ValidationError: If the value is not a structurally valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"Invalid {field}", field=field)
