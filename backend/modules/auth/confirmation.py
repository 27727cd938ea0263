"""
Magic link confirmation handler.

Consumes the tokens Supabase appends to the redirect URL fragment,
establishes a session with the credential store and records the login
in the freshness ledger.

    pending -> session_established -> recorded
    pending -> failed

The email that gets recorded always comes from the established session,
never from the client.
"""

import logging
from typing import Optional
from urllib.parse import parse_qs

from modules.freshness.interfaces import IFreshnessRecorder
from shared.exceptions import BlinkshopError

from .interfaces import ICredentialStore
from .models import ConfirmationOutcome, ConfirmationRequest, ConfirmationState
from .exceptions import InvalidConfirmationLinkError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Authentication successful! Your iOS Shortcut is now ready to use."
FAILURE_MESSAGE = "Authentication failed. Please try again."


def parse_fragment(fragment: Optional[str]) -> tuple[str, str]:
    """
    Extract access and refresh tokens from a redirect URL fragment.

    Accepts the fragment with or without its leading '#'.

    Raises:
        InvalidConfirmationLinkError: If either token is absent
    """
    if not fragment:
        raise InvalidConfirmationLinkError()

    params = parse_qs(fragment.lstrip("#"))
    access_token = params.get("access_token", [""])[0]
    refresh_token = params.get("refresh_token", [""])[0]

    if not access_token or not refresh_token:
        raise InvalidConfirmationLinkError()
    return access_token, refresh_token


TRANSITIONS: dict[ConfirmationState, frozenset[ConfirmationState]] = {
    ConfirmationState.PENDING: frozenset({
        ConfirmationState.SESSION_ESTABLISHED,
        ConfirmationState.FAILED,
    }),
    ConfirmationState.SESSION_ESTABLISHED: frozenset({ConfirmationState.RECORDED}),
    ConfirmationState.RECORDED: frozenset(),
    ConfirmationState.FAILED: frozenset(),
}


class ConfirmationAttempt:
    """State of one confirmation, starting at pending."""

    def __init__(self):
        self.history: list[ConfirmationState] = [ConfirmationState.PENDING]

    @property
    def state(self) -> ConfirmationState:
        return self.history[-1]

    def advance(self, state: ConfirmationState) -> None:
        if state not in TRANSITIONS[self.state]:
            raise ValueError(f"Cannot move confirmation from {self.state.value} to {state.value}")
        logger.debug("Confirmation %s -> %s", self.state.value, state.value)
        self.history.append(state)


class ConfirmationHandler:
    """
    Drives a single confirmation from pending to a terminal state.

    Recorder failures are logged and do not fail the confirmation, since
    the session itself is already valid. The outcome's `recorded` flag
    reports whether the ledger write went through.
    """

    def __init__(
        self,
        credential_store: ICredentialStore,
        recorder: IFreshnessRecorder,
    ):
        self._store = credential_store
        self._recorder = recorder

    async def confirm(self, request: ConfirmationRequest) -> ConfirmationOutcome:
        attempt = ConfirmationAttempt()
        try:
            if request.access_token and request.refresh_token:
                access_token, refresh_token = request.access_token, request.refresh_token
            else:
                access_token, refresh_token = parse_fragment(request.fragment)

            session = await self._store.establish_session(access_token, refresh_token)
        except BlinkshopError as e:
            logger.warning("Confirmation failed before session was established: %s", e.message)
            attempt.advance(ConfirmationState.FAILED)
            return ConfirmationOutcome(
                state=attempt.state,
                message=FAILURE_MESSAGE,
                history=attempt.history,
            )
        attempt.advance(ConfirmationState.SESSION_ESTABLISHED)

        recorded = False
        try:
            await self._recorder.record(session.email, session.access_token)
            recorded = True
        except BlinkshopError as e:
            # Best-effort: the session is valid even if the ledger write fails.
            logger.error("Failed to record authentication for %s: %s", session.email, e.message)
        attempt.advance(ConfirmationState.RECORDED)

        return ConfirmationOutcome(
            state=attempt.state,
            message=SUCCESS_MESSAGE,
            email=session.email,
            recorded=recorded,
            history=attempt.history,
        )
