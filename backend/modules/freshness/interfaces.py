"""
Authentication freshness module interfaces.

The shortcut gate depends on IFreshnessChecker and the confirmation
handler depends on IFreshnessRecorder; both depend on IFreshnessLedger
for storage.
"""

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable

from .models import FreshnessCheckResult, LedgerEntry, RecordResult


@runtime_checkable
class IFreshnessLedger(Protocol):
    """
    Storage contract for authentication freshness rows.

    Implementations must key rows by email and never create duplicates.
    """

    def upsert(
        self,
        email: str,
        authenticated_at: datetime,
        last_used_at: datetime,
    ) -> LedgerEntry:
        """Insert or overwrite the row for an email."""
        ...

    def find_by_email_with_min_authenticated_at(
        self,
        email: str,
        cutoff: datetime,
    ) -> Optional[LedgerEntry]:
        """Return the row for an email if authenticated_at >= cutoff, else None."""
        ...

    def touch_last_used(self, email: str, timestamp: datetime) -> None:
        """Set last_used_at for an email's row."""
        ...

    def get(self, email: str) -> Optional[LedgerEntry]:
        """Return the raw row for an email regardless of age."""
        ...


@runtime_checkable
class IFreshnessChecker(Protocol):
    """Decides whether an email holds a login within the freshness window."""

    async def check(self, email: str) -> FreshnessCheckResult:
        """
        Check freshness and refresh last_used_at on success.

        Raises:
            ValidationError: If the email is missing or malformed
            LedgerError: If the datastore fails
        """
        ...


@runtime_checkable
class IFreshnessRecorder(Protocol):
    """Records a just-completed interactive login."""

    async def record(self, email: str, access_token: Optional[str]) -> RecordResult:
        """
        Reset both timestamps for an email to now.

        Args:
            email: Email the login was completed for
            access_token: Bearer token from the just-established session

        Raises:
            AuthenticationError: If the token is missing or invalid
            TokenEmailMismatchError: If the token belongs to another email
            LedgerError: If the datastore fails
        """
        ...
