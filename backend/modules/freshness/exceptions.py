"""
Authentication freshness module exceptions.
"""

from shared.exceptions import ExternalServiceError


class LedgerError(ExternalServiceError):
    """Raised when the authenticated_users table cannot be read or written."""

    pass
