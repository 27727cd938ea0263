"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class TokenEmailMismatchError(AuthorizationError):
    """Raised when a valid token belongs to a different email than requested."""

    def __init__(self, requested_email: str):
        super().__init__(
            "Token does not belong to the requested email",
            code="TOKEN_EMAIL_MISMATCH",
            details={"email": requested_email},
        )


class InvalidConfirmationLinkError(AuthenticationError):
    """Raised when a confirmation redirect carries no usable tokens."""

    def __init__(self, message: str = "Invalid authentication link"):
        super().__init__(message, code="INVALID_CONFIRMATION_LINK")


class SessionExchangeError(AuthenticationError):
    """Raised when the credential store rejects the redirected tokens."""

    def __init__(self, message: str = "Could not establish a session"):
        super().__init__(message, code="SESSION_EXCHANGE_FAILED")


class CredentialStoreError(ExternalServiceError):
    """Raised when the credential store cannot be reached or errors."""

    def __init__(
        self,
        message: str = "Credential store request failed",
        code: Optional[str] = None,
    ):
        super().__init__(message, service="supabase_auth", code=code or "CREDENTIAL_STORE_ERROR")


class MagicLinkError(CredentialStoreError):
    """Raised when a magic link could not be issued."""

    def __init__(self, email: str):
        super().__init__("Failed to send magic link", code="MAGIC_LINK_FAILED")
        self.details["email"] = email
