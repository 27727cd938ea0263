"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating datastore failures into
ExternalServiceError so callers never see raw client exceptions.
"""

import logging
from typing import Any, Callable, TypeVar, Generic

from supabase import Client

from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() wrapper for consistent error translation

    Example:
        class ListingRepository(BaseRepository[Listing]):
            def get_by_id(self, listing_id: str) -> Optional[Listing]:
                result = self._execute(
                    "get listing",
                    lambda: self._db.table("listings").select("*").eq("id", listing_id).execute(),
                )
                if not result.data:
                    return None
                return self._map_to_listing(result.data[0])
    """

    table_name: str = ""
    error_class: type[ExternalServiceError] = ExternalServiceError

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self):
        return self._db.table(self.table_name)

    def _execute(self, operation: str, query: Callable[[], Any]) -> Any:
        """
        Run a query, wrapping any client failure in the repository's error class.

        Args:
            operation: Short description used in logs and error messages.
            query: Zero-argument callable that builds and executes the query.
        """
        try:
            return query()
        except ExternalServiceError:
            raise
        except Exception as e:
            logger.error("Supabase %s failed on %s: %s", operation, self.table_name, e)
            raise self.error_class(
                f"Database error during {operation}",
                service="supabase",
                details={"table": self.table_name},
            ) from e
