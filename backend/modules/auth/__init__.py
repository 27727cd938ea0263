"""
Authentication module.

Handles JWT validation, magic link issuance and magic link confirmation
against Supabase Auth.

Public API:
- IAuthService, ICredentialStore, IMagicLinkTrigger: interfaces
- EstablishedSession, MagicLinkResult, ConfirmationOutcome: models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ICredentialStore, IMagicLinkTrigger
from .models import (
    JWTPayload,
    EstablishedSession,
    MagicLinkResult,
    ConfirmationState,
    ConfirmationRequest,
    ConfirmationOutcome,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    TokenEmailMismatchError,
    InvalidConfirmationLinkError,
    SessionExchangeError,
    CredentialStoreError,
    MagicLinkError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ICredentialStore",
    "IMagicLinkTrigger",
    # Models
    "JWTPayload",
    "EstablishedSession",
    "MagicLinkResult",
    "ConfirmationState",
    "ConfirmationRequest",
    "ConfirmationOutcome",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "TokenEmailMismatchError",
    "InvalidConfirmationLinkError",
    "SessionExchangeError",
    "CredentialStoreError",
    "MagicLinkError",
]
