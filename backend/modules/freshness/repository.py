"""
Authentication freshness ledger storage.

Provides both in-memory (for testing and local development) and
Supabase-backed (for production) implementations of IFreshnessLedger.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .interfaces import IFreshnessLedger
from .models import LedgerEntry
from .exceptions import LedgerError

LEDGER_COLUMNS = "email, authenticated_at, last_used_at"


class InMemoryFreshnessLedger(IFreshnessLedger):
    """
    Freshness ledger held in a dict keyed by email.

    For testing and development. Use SupabaseFreshnessLedger for production.
    """

    def __init__(self) -> None:
        self._rows: dict[str, LedgerEntry] = {}

    def upsert(
        self,
        email: str,
        authenticated_at: datetime,
        last_used_at: datetime,
    ) -> LedgerEntry:
        entry = LedgerEntry(
            email=email,
            authenticated_at=authenticated_at,
            last_used_at=last_used_at,
        )
        self._rows[email] = entry
        return entry

    def find_by_email_with_min_authenticated_at(
        self,
        email: str,
        cutoff: datetime,
    ) -> Optional[LedgerEntry]:
        entry = self._rows.get(email)
        if entry is None or entry.authenticated_at < cutoff:
            return None
        return entry

    def touch_last_used(self, email: str, timestamp: datetime) -> None:
        entry = self._rows.get(email)
        if entry is not None:
            self._rows[email] = entry.model_copy(update={"last_used_at": timestamp})

    def get(self, email: str) -> Optional[LedgerEntry]:
        return self._rows.get(email)

    def __len__(self) -> int:
        return len(self._rows)


class SupabaseFreshnessLedger(BaseRepository[LedgerEntry], IFreshnessLedger):
    """
    Freshness ledger stored in the authenticated_users table.

    Relies on the table's unique constraint on email and PostgREST's
    atomic upsert, so a failed write never leaves a partial row.
    """

    table_name = "authenticated_users"
    error_class = LedgerError

    def upsert(
        self,
        email: str,
        authenticated_at: datetime,
        last_used_at: datetime,
    ) -> LedgerEntry:
        data = {
            "email": email,
            "authenticated_at": authenticated_at.isoformat(),
            "last_used_at": last_used_at.isoformat(),
        }
        result = self._execute(
            "upsert",
            lambda: self._table().upsert(
                data,
                on_conflict="email",
                ignore_duplicates=False,
            ).execute(),
        )
        if result.data:
            return self._map_to_entry(result.data[0])
        return LedgerEntry(
            email=email,
            authenticated_at=authenticated_at,
            last_used_at=last_used_at,
        )

    def find_by_email_with_min_authenticated_at(
        self,
        email: str,
        cutoff: datetime,
    ) -> Optional[LedgerEntry]:
        result = self._execute(
            "freshness lookup",
            lambda: self._table()
            .select(LEDGER_COLUMNS)
            .eq("email", email)
            .gte("authenticated_at", cutoff.isoformat())
            .limit(1)
            .execute(),
        )
        if not result.data:
            return None
        return self._map_to_entry(result.data[0])

    def touch_last_used(self, email: str, timestamp: datetime) -> None:
        self._execute(
            "touch last_used_at",
            lambda: self._table()
            .update({"last_used_at": timestamp.isoformat()})
            .eq("email", email)
            .execute(),
        )

    def get(self, email: str) -> Optional[LedgerEntry]:
        result = self._execute(
            "get",
            lambda: self._table().select(LEDGER_COLUMNS).eq("email", email).limit(1).execute(),
        )
        if not result.data:
            return None
        return self._map_to_entry(result.data[0])

    def _map_to_entry(self, data: dict[str, Any]) -> LedgerEntry:
        """Map database row to LedgerEntry model."""
        return LedgerEntry(
            email=data["email"],
            authenticated_at=data["authenticated_at"],
            last_used_at=data["last_used_at"],
        )
