"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with fakes and swapping the
credential store without touching callers.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import EstablishedSession, MagicLinkResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for access token validation.

    The freshness recorder uses this to verify the proof of a
    just-completed login.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and email

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...


@runtime_checkable
class ICredentialStore(Protocol):
    """
    Interface for the external identity provider.

    Issues one-time magic links and exchanges redeemed tokens for a
    session. Link validity, expiry and single use are owned by the store.
    """

    async def send_magic_link(self, email: str, redirect_to: str) -> None:
        """
        Request a one-time login link for an email.

        Raises:
            MagicLinkError: If the store refuses or cannot be reached
        """
        ...

    async def establish_session(
        self,
        access_token: str,
        refresh_token: str,
    ) -> EstablishedSession:
        """
        Exchange redirected tokens for a verified session.

        Raises:
            SessionExchangeError: If the store rejects the tokens
        """
        ...


@runtime_checkable
class IMagicLinkTrigger(Protocol):
    """Interface for issuing magic links to a configured redirect target."""

    async def trigger(self, email: str) -> MagicLinkResult:
        """
        Issue a new magic link for an email.

        Raises:
            ValidationError: If the email is missing or malformed
            MagicLinkError: If the credential store fails
        """
        ...
