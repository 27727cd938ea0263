"""
Shared infrastructure for Blinkshop backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factories
- exceptions: Base exception classes
- models: Authenticated user and email normalization

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_service_client, create_anon_client
from .exceptions import (
    BlinkshopError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, EmailRequest, normalize_email

__all__ = [
    "Settings",
    "get_settings",
    "create_service_client",
    "create_anon_client",
    "BlinkshopError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "EmailRequest",
    "normalize_email",
]
