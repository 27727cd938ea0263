"""
Magic link trigger.

Asks the credential store to email a one-time login link that redirects
to the configured confirmation page. Nothing about in-flight links is
kept locally; re-triggering simply issues another link.
"""

import logging

from shared.models import normalize_email

from .interfaces import ICredentialStore, IMagicLinkTrigger
from .models import MagicLinkResult

logger = logging.getLogger(__name__)


class MagicLinkTrigger(IMagicLinkTrigger):
    """Issues magic links through an ICredentialStore."""

    def __init__(self, credential_store: ICredentialStore, redirect_url: str):
        self._store = credential_store
        self._redirect_url = redirect_url

    @property
    def redirect_url(self) -> str:
        return self._redirect_url

    async def trigger(self, email: str) -> MagicLinkResult:
        email = normalize_email(email)
        await self._store.send_magic_link(email, self._redirect_url)
        logger.info("Magic link issued for %s", email)
        return MagicLinkResult(
            success=True,
            message="Magic link sent! Check your email, then retry your shortcut.",
        )
