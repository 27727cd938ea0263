"""
Authentication freshness data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class LedgerEntry(BaseModel):
    """
    One row of the authenticated_users table.

    There is at most one entry per (normalized) email.
    """

    email: str = Field(..., description="Normalized email, the natural key")
    authenticated_at: datetime = Field(..., description="Most recent full login")
    last_used_at: datetime = Field(..., description="Most recent successful check")


class FreshnessCheckResult(BaseModel):
    """Result of a freshness check."""

    authenticated: bool
    message: str
    last_used_at: Optional[datetime] = Field(
        None,
        description="Previous last use, before this check refreshed it",
    )


class RecordResult(BaseModel):
    """Result of recording a completed login."""

    success: bool
    message: str
