"""
Listings module interface.

The API layer depends on IListingService for all listing operations.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import BuyResponse, CreateListingRequest, CreateListingResponse, ListingView


@runtime_checkable
class IListingService(Protocol):
    """Interface for listing operations."""

    async def create_listing(
        self,
        user_id: str,
        request: CreateListingRequest,
    ) -> CreateListingResponse:
        """
        Create a listing in DRAFT status.

        Payment setup is not required to create a listing.
        """
        ...

    async def get_listing_view(
        self,
        listing_id: str,
        viewer_id: Optional[str] = None,
    ) -> ListingView:
        """
        Get the public view of a listing.

        Raises:
            ListingNotFoundError: If the listing does not exist
        """
        ...

    async def buy(self, listing_id: str) -> BuyResponse:
        """
        Respond to the buy button. Checkout is a placeholder.

        Raises:
            ListingNotFoundError: If the listing does not exist
            ListingUnavailableError: If the listing is sold out or withdrawn
        """
        ...
