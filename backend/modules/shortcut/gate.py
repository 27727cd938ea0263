"""
Headless upload gate.

Decides whether an unattended client (the iOS Shortcut) may upload on
behalf of an email. Strategies are evaluated in order and the first one
that matches authorizes the request. When none match, a magic link is
sent and the client is told to retry after confirming it, since a
headless client cannot follow the login redirect itself.
"""

import hmac
import logging
from typing import Optional, Protocol, Sequence

from modules.auth.interfaces import IMagicLinkTrigger
from modules.freshness.interfaces import IFreshnessChecker
from shared.exceptions import BlinkshopError

from .models import GateDecision, GateRemedy

logger = logging.getLogger(__name__)

CHECK_EMAIL_MESSAGE = (
    "Authentication required. Check your email for a magic link, "
    "then run this shortcut again."
)
AUTH_FAILED_MESSAGE = "Authentication failed. Please try again."


def parse_bearer(auth_header: Optional[str]) -> Optional[str]:
    """Return the credential from an 'Authorization: Bearer <token>' header."""
    if not auth_header:
        return None
    scheme, _, credential = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not credential.strip():
        return None
    return credential.strip()


class AuthStrategy(Protocol):
    """A single way of recognizing an authorized headless caller."""

    name: str

    async def matches(self, email: str, bearer: Optional[str]) -> bool:
        ...


class SharedSecretStrategy:
    """
    Authorizes callers presenting the operator's shared secret.

    Never touches the freshness ledger. Disabled when no secret is set.
    """

    name = "shared_secret"

    def __init__(self, secret: str):
        self._secret = secret

    async def matches(self, email: str, bearer: Optional[str]) -> bool:
        if not self._secret or not bearer:
            return False
        return hmac.compare_digest(bearer.encode(), self._secret.encode())


class FreshnessStrategy:
    """Authorizes emails with a login inside the freshness window."""

    name = "freshness"

    def __init__(self, checker: IFreshnessChecker):
        self._checker = checker

    async def matches(self, email: str, bearer: Optional[str]) -> bool:
        result = await self._checker.check(email)
        return result.authenticated


class HeadlessUploadGate:
    """Ordered, first-match-wins authorization for headless uploads."""

    def __init__(
        self,
        strategies: Sequence[AuthStrategy],
        magic_link: IMagicLinkTrigger,
    ):
        self._strategies = list(strategies)
        self._magic_link = magic_link

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    async def authorize(self, email: str, auth_header: Optional[str]) -> GateDecision:
        bearer = parse_bearer(auth_header)

        for strategy in self._strategies:
            try:
                matched = await strategy.matches(email, bearer)
            except BlinkshopError as e:
                logger.error("Gate strategy %s failed for %s: %s", strategy.name, email, e.message)
                return GateDecision(
                    authorized=False,
                    remedy=GateRemedy.AUTH_FAILED,
                    message=AUTH_FAILED_MESSAGE,
                )
            if matched:
                return GateDecision(authorized=True, strategy=strategy.name)

        logger.info("User %s not authenticated, sending magic link", email)
        try:
            await self._magic_link.trigger(email)
        except BlinkshopError as e:
            logger.error("Magic link error for %s: %s", email, e.message)
            return GateDecision(
                authorized=False,
                remedy=GateRemedy.AUTH_FAILED,
                message=AUTH_FAILED_MESSAGE,
            )

        return GateDecision(
            authorized=False,
            remedy=GateRemedy.CHECK_EMAIL,
            message=CHECK_EMAIL_MESSAGE,
        )
