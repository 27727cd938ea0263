"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: Optional[str]) -> str:
    """
    Validate an email address and return its canonical form.

    Supabase Auth stores addresses lower-cased, so the ledger and every
    comparison against a verified token use the same trimmed, lower-cased
    form.

    Raises:
        ValidationError: If the email is missing or malformed
    """
    if not email or not isinstance(email, str) or not email.strip():
        raise ValidationError("Email required", code="EMAIL_REQUIRED")

    try:
        validated = _email_adapter.validate_python(email.strip())
    except PydanticValidationError:
        raise ValidationError(
            "Invalid email address",
            code="INVALID_EMAIL",
            details={"email": email},
        )
    return str(validated).lower()


class EmailRequest(BaseModel):
    """
    Request body carrying only an email.

    The email is optional at the schema level so that a missing value is
    reported by normalize_email() as a 400 rather than a schema error.
    """

    email: Optional[str] = None


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from JWT claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: EmailStr = Field(..., description="User's email address")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    last_sign_in: Optional[datetime] = Field(None, description="Token issue time")
    role: str = Field(default="user", description="User role")

    model_config = {
        "frozen": True,
        "extra": "ignore",  # Ignore extra fields from JWT
    }
