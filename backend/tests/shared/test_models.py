"""Tests for shared/models.py."""

import pytest

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser, EmailRequest, normalize_email


class TestNormalizeEmail:

    @pytest.mark.parametrize("raw,expected", [
        ("a@x.com", "a@x.com"),
        ("A@X.COM", "a@x.com"),
        ("  Seller@Blink.Shop ", "seller@blink.shop"),
    ])
    def test_normalizes(self, raw, expected):
        assert normalize_email(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            normalize_email(raw)
        assert exc_info.value.code == "EMAIL_REQUIRED"
        assert exc_info.value.message == "Email required"

    @pytest.mark.parametrize("raw", ["nope", "a@", "@x.com", "a b@x.com"])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            normalize_email(raw)
        assert exc_info.value.code == "INVALID_EMAIL"


class TestEmailRequest:
    def test_email_optional(self):
        assert EmailRequest().email is None


class TestAuthenticatedUser:
    def test_create_user(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        assert user.role == "user"
        assert user.email_verified is False

    def test_user_is_immutable(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        with pytest.raises(Exception):  # Pydantic ValidationError
            user.id = "different-id"

    def test_ignores_extra_claims(self):
        user = AuthenticatedUser(id="user-123", email="test@example.com", aud="authenticated")
        assert not hasattr(user, "aud")
