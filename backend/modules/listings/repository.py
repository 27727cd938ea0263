"""
Listing repository for database access.

Encapsulates Supabase queries and data mapping for the listings table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Listing, ListingStatus, ListingTheme
from .exceptions import ListingStoreError


class ListingRepository(BaseRepository[Listing]):
    """
    Repository for listing data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for ownership decisions.
    """

    table_name = "listings"
    error_class = ListingStoreError

    def create(self, data: dict[str, Any]) -> Listing:
        """
        Insert a listing row.

        Args:
            data: Column values (user_id, title, price_cents, etc.)

        Returns:
            Created Listing with generated ID and timestamps.
        """
        result = self._execute("insert", lambda: self._table().insert(data).execute())
        return self._map_to_listing(result.data[0])

    def get_by_id(self, listing_id: str) -> Optional[Listing]:
        """
        Get a listing by ID.

        Returns:
            Listing, or None if not found.
        """
        result = self._execute(
            "get",
            lambda: self._table().select("*").eq("id", listing_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_listing(result.data[0])

    def _map_to_listing(self, data: dict[str, Any]) -> Listing:
        """Map database row to Listing model."""
        return Listing(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            title=data["title"],
            story=data.get("story"),
            price_cents=data["price_cents"],
            quantity=data.get("quantity", 1),
            sold_count=data.get("sold_count", 0),
            image_url=data["image_url"],
            theme=ListingTheme(data.get("theme", ListingTheme.MINIMAL.value)),
            shipping_info=data.get("shipping_info"),
            returns_info=data.get("returns_info"),
            status=ListingStatus(data.get("status", ListingStatus.DRAFT.value)),
            created_at=data.get("created_at"),
        )
