"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
from unittest.mock import MagicMock
import jwt  # PyJWT

# Import the application package first so module routers resolve
# api.dependencies against a fully initialised api package.
from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.models import EstablishedSession, MagicLinkResult
from modules.auth.exceptions import MagicLinkError, SessionExchangeError
from modules.freshness.repository import InMemoryFreshnessLedger
from shared.config import Settings


# Test JWT secret (only for testing - matches test_auth.py)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Fixed reference time for freshness scenarios
T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, TEST_JWT_SECRET, algorithm="HS256")


class FakeClock:
    """Settable clock for freshness tests."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeCredentialStore:
    """In-memory credential store recording every call."""

    def __init__(self, session_email: Optional[str] = "test@example.com"):
        self.sent: list[tuple[str, str]] = []
        self.exchanges: list[tuple[str, str]] = []
        self.session_email = session_email
        self.fail_send = False

    async def send_magic_link(self, email: str, redirect_to: str) -> None:
        if self.fail_send:
            raise MagicLinkError(email)
        self.sent.append((email, redirect_to))

    async def establish_session(self, access_token: str, refresh_token: str) -> EstablishedSession:
        self.exchanges.append((access_token, refresh_token))
        if self.session_email is None:
            raise SessionExchangeError()
        return EstablishedSession(
            user_id="test-user-123",
            email=self.session_email,
            access_token=access_token,
        )


class FakeMagicLinkTrigger:
    """Magic link trigger that counts calls."""

    def __init__(self, fail: bool = False):
        self.calls: list[str] = []
        self.fail = fail

    async def trigger(self, email: str) -> MagicLinkResult:
        self.calls.append(email)
        if self.fail:
            raise MagicLinkError(email)
        return MagicLinkResult(success=True, message="Magic link sent!")


@pytest.fixture
def test_settings() -> Settings:
    """Settings with test credentials and no .env lookups."""
    return Settings(
        _env_file=None,
        supabase_url="https://test.supabase.co",
        supabase_anon_key="anon-key",
        supabase_service_role_key="service-key",
        supabase_jwt_secret=TEST_JWT_SECRET,
        site_url="https://blink.shop",
        shortcut_auth_secret="shortcut-secret",
        cloudinary_cloud_name="demo",
        cloudinary_api_key="key",
        cloudinary_api_secret="secret",
    )


@pytest.fixture
def container(test_settings: Settings) -> ServiceContainer:
    """Service container with the Supabase client replaced by a mock."""
    container = ServiceContainer(test_settings)
    container._db = MagicMock()
    return container


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app for each test."""
    return create_app(container)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger() -> InMemoryFreshnessLedger:
    return InMemoryFreshnessLedger()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
