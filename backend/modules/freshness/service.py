"""
Authentication freshness services.

A login is fresh for a rolling window (30 days by default) measured from
the most recent full login, i.e. from authenticated_at. Successful checks
update last_used_at but do not extend the window; only a new login does.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingTokenError, TokenEmailMismatchError
from shared.models import normalize_email

from .interfaces import IFreshnessChecker, IFreshnessLedger, IFreshnessRecorder
from .models import FreshnessCheckResult, RecordResult

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FreshnessChecker(IFreshnessChecker):
    """
    Checks an email against the freshness window.

    Never-seen and stale emails are reported identically. The
    check-then-touch sequence is not atomic; concurrent checks may both
    write last_used_at, and the last write wins.
    """

    def __init__(
        self,
        ledger: IFreshnessLedger,
        window_days: int = DEFAULT_WINDOW_DAYS,
        clock: Clock = utc_now,
    ):
        self._ledger = ledger
        self._window = timedelta(days=window_days)
        self._clock = clock

    @property
    def window(self) -> timedelta:
        return self._window

    async def check(self, email: str) -> FreshnessCheckResult:
        email = normalize_email(email)
        now = self._clock()
        cutoff = now - self._window

        entry = self._ledger.find_by_email_with_min_authenticated_at(email, cutoff)
        if entry is None:
            return FreshnessCheckResult(
                authenticated=False,
                message="Authentication required",
            )

        self._ledger.touch_last_used(email, now)
        return FreshnessCheckResult(
            authenticated=True,
            message="User is authenticated",
            last_used_at=entry.last_used_at,
        )


class FreshnessRecorder(IFreshnessRecorder):
    """
    Records a completed login, resetting the freshness window.

    Requires the bearer token of the just-established session and checks
    that it was issued for the email being recorded, so a caller cannot
    mark an arbitrary address as freshly authenticated.
    """

    def __init__(
        self,
        ledger: IFreshnessLedger,
        auth: IAuthService,
        clock: Clock = utc_now,
    ):
        self._ledger = ledger
        self._auth = auth
        self._clock = clock

    async def record(self, email: str, access_token: Optional[str]) -> RecordResult:
        email = normalize_email(email)
        if not access_token:
            raise MissingTokenError()

        user = await self._auth.validate_token(access_token)
        if normalize_email(user.email) != email:
            logger.warning("Refusing to record %s: token issued for another user", email)
            raise TokenEmailMismatchError(email)

        now = self._clock()
        self._ledger.upsert(email, authenticated_at=now, last_used_at=now)
        logger.info("Recorded authentication for %s", email)
        return RecordResult(success=True, message="Authentication recorded successfully")
