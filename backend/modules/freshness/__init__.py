"""
Authentication freshness module.

Tracks when each email last completed a full magic-link login and decides
whether that login is still inside the rolling freshness window.

Public API:
- IFreshnessLedger, IFreshnessChecker, IFreshnessRecorder: interfaces
- LedgerEntry, FreshnessCheckResult, RecordResult: models
- LedgerError: datastore failure
"""

from .interfaces import IFreshnessLedger, IFreshnessChecker, IFreshnessRecorder
from .models import LedgerEntry, FreshnessCheckResult, RecordResult
from .exceptions import LedgerError

__all__ = [
    # Interfaces
    "IFreshnessLedger",
    "IFreshnessChecker",
    "IFreshnessRecorder",
    # Models
    "LedgerEntry",
    "FreshnessCheckResult",
    "RecordResult",
    # Exceptions
    "LedgerError",
]
