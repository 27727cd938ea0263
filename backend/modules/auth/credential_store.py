"""
Supabase Auth adapter for the credential store interface.

Magic links are issued with the service client. Session exchanges run on a
fresh anon client per call, because set_session() stores the session on the
client it is called on.
"""

import logging
from typing import Callable

from supabase import Client

from .interfaces import ICredentialStore
from .models import EstablishedSession
from .exceptions import MagicLinkError, SessionExchangeError

logger = logging.getLogger(__name__)


class SupabaseCredentialStore(ICredentialStore):
    """Credential store backed by Supabase Auth."""

    def __init__(
        self,
        service_client: Client,
        anon_client_factory: Callable[[], Client],
    ):
        self._service = service_client
        self._anon_client_factory = anon_client_factory

    async def send_magic_link(self, email: str, redirect_to: str) -> None:
        try:
            self._service.auth.sign_in_with_otp({
                "email": email,
                "options": {"email_redirect_to": redirect_to},
            })
        except Exception as e:
            logger.error("Magic link request failed: %s", e)
            raise MagicLinkError(email) from e

    async def establish_session(
        self,
        access_token: str,
        refresh_token: str,
    ) -> EstablishedSession:
        client = self._anon_client_factory()
        try:
            response = client.auth.set_session(access_token, refresh_token)
        except Exception as e:
            logger.warning("Session exchange rejected: %s", e)
            raise SessionExchangeError() from e

        user = getattr(response, "user", None)
        if user is None or not user.email:
            raise SessionExchangeError("Session has no verified email")

        session = getattr(response, "session", None)
        # A refreshed session carries a new access token; prefer it.
        token = session.access_token if session is not None else access_token

        return EstablishedSession(
            user_id=str(user.id),
            email=user.email,
            access_token=token,
        )
