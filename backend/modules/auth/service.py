"""
Authentication service implementation.

Validates Supabase JWT tokens and provides user authentication.
"""

from datetime import datetime, timezone
from typing import Optional
import jwt

from shared.config import Settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens signed with the project's JWT secret.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        jwt_payload = JWTPayload(**payload)
        if not jwt_payload.email:
            raise InvalidTokenError("Token carries no email claim")

        return AuthenticatedUser(
            id=jwt_payload.sub,
            email=jwt_payload.email,
            email_verified=jwt_payload.email_confirmed_at is not None,
            last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
            role=jwt_payload.role if jwt_payload.role != "authenticated" else "user",
        )
