"""Tests for the Supabase Auth credential store adapter."""

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from modules.auth.credential_store import SupabaseCredentialStore
from modules.auth.exceptions import MagicLinkError, SessionExchangeError


def make_store(anon_client=None):
    service_client = MagicMock()
    anon_client = anon_client or MagicMock()
    factory = MagicMock(return_value=anon_client)
    return SupabaseCredentialStore(service_client, factory), service_client, factory


class TestSendMagicLink:

    @pytest.mark.asyncio
    async def test_calls_sign_in_with_otp(self):
        store, service_client, _ = make_store()

        await store.send_magic_link("c@x.com", "https://blink.shop/auth-confirm")

        service_client.auth.sign_in_with_otp.assert_called_once_with({
            "email": "c@x.com",
            "options": {"email_redirect_to": "https://blink.shop/auth-confirm"},
        })

    @pytest.mark.asyncio
    async def test_failure_raises_magic_link_error(self):
        store, service_client, _ = make_store()
        service_client.auth.sign_in_with_otp.side_effect = Exception("rate limited")

        with pytest.raises(MagicLinkError) as exc_info:
            await store.send_magic_link("c@x.com", "https://blink.shop/auth-confirm")

        assert exc_info.value.details["email"] == "c@x.com"
        assert exc_info.value.details["service"] == "supabase_auth"


class TestEstablishSession:

    @pytest.mark.asyncio
    async def test_returns_session_email(self):
        anon = MagicMock()
        anon.auth.set_session.return_value = SimpleNamespace(
            user=SimpleNamespace(id="user-1", email="a@x.com"),
            session=SimpleNamespace(access_token="fresh-access"),
        )
        store, _, factory = make_store(anon)

        session = await store.establish_session("access", "refresh")

        anon.auth.set_session.assert_called_once_with("access", "refresh")
        assert session.email == "a@x.com"
        assert session.user_id == "user-1"
        assert session.access_token == "fresh-access"
        factory.assert_called_once()

    @pytest.mark.asyncio
    async def test_uses_fresh_client_per_exchange(self):
        anon = MagicMock()
        anon.auth.set_session.return_value = SimpleNamespace(
            user=SimpleNamespace(id="user-1", email="a@x.com"),
            session=None,
        )
        store, _, factory = make_store(anon)

        first = await store.establish_session("access", "refresh")
        await store.establish_session("access", "refresh")

        assert factory.call_count == 2
        assert first.access_token == "access"

    @pytest.mark.asyncio
    async def test_rejected_tokens(self):
        anon = MagicMock()
        anon.auth.set_session.side_effect = Exception("invalid refresh token")
        store, _, _ = make_store(anon)

        with pytest.raises(SessionExchangeError):
            await store.establish_session("access", "bad")

    @pytest.mark.asyncio
    async def test_session_without_user(self):
        anon = MagicMock()
        anon.auth.set_session.return_value = SimpleNamespace(user=None, session=None)
        store, _, _ = make_store(anon)

        with pytest.raises(SessionExchangeError) as exc_info:
            await store.establish_session("access", "refresh")
        assert exc_info.value.message == "Session has no verified email"
