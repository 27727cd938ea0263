"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    email_confirmed_at: Optional[str] = Field(None, description="Email confirmation time")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)


class EstablishedSession(BaseModel):
    """A session returned by the credential store after a token exchange."""

    user_id: str
    email: str
    access_token: str

    model_config = {"frozen": True}


class MagicLinkResult(BaseModel):
    """Outcome of a magic link request."""

    success: bool
    message: str


class ConfirmationState(str, Enum):
    """States of a magic link confirmation."""

    PENDING = "pending"
    SESSION_ESTABLISHED = "session_established"
    RECORDED = "recorded"
    FAILED = "failed"


class ConfirmationRequest(BaseModel):
    """
    Tokens delivered to the confirmation page.

    Either the raw URL fragment (without the leading '#') or the two
    tokens already split out by the page.
    """

    fragment: Optional[str] = None
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None


class ConfirmationOutcome(BaseModel):
    """Terminal result of a confirmation attempt."""

    state: ConfirmationState
    message: str
    email: Optional[str] = None
    recorded: bool = Field(
        default=False,
        description="Whether the freshness ledger write succeeded",
    )
    history: list[ConfirmationState] = Field(
        default_factory=list,
        description="States passed through, starting at pending",
    )
