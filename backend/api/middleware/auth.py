"""
Bearer token dependencies for seller routes.

Tokens are validated by the container's auth service, so every route
checks them against the same settings the application was built with.
"""

from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from ..dependencies import get_container

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.post("")
        async def create_listing(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise AuthError("Authentication required")

    try:
        return await get_container(request).auth.validate_token(credentials.credentials)
    except AuthenticationError as e:
        raise AuthError(e.message)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Used by the public listing page to tell the seller apart from buyers.
    """
    if credentials is None:
        return None

    try:
        return await get_container(request).auth.validate_token(credentials.credentials)
    except AuthenticationError:
        return None
