"""
Listing service implementation.

Listings are created as drafts; sellers finish payment setup later.
Checkout is not implemented and the buy action only reports what the
buyer would see.
"""

import logging
from typing import Optional

from .interfaces import IListingService
from .models import (
    BuyResponse,
    CreateListingRequest,
    CreateListingResponse,
    ListingStatus,
    ListingView,
    format_price,
)
from .repository import ListingRepository
from .exceptions import ListingNotFoundError, ListingUnavailableError

logger = logging.getLogger(__name__)

DRAFT_CREATED_MESSAGE = "Draft listing created! Complete payment setup to start accepting orders."
DRAFT_BUY_MESSAGE = (
    "This seller is completing payment setup - "
    "they'll be able to accept orders soon!"
)
CHECKOUT_PENDING_MESSAGE = "Checkout is coming soon!"


class ListingService(IListingService):
    """Listing service with Supabase backend."""

    def __init__(self, repository: ListingRepository, site_url: str):
        self._repository = repository
        self._site_url = site_url.rstrip("/")

    def checkout_url(self, listing_id: str) -> str:
        return f"{self._site_url}/listing/{listing_id}"

    async def create_listing(
        self,
        user_id: str,
        request: CreateListingRequest,
    ) -> CreateListingResponse:
        logger.info("Creating draft listing for user %s", user_id)
        data = {
            "user_id": user_id,
            "title": request.title,
            "story": request.story,
            "price_cents": request.price_cents,
            "quantity": request.quantity,
            "image_url": request.image_url,
            "theme": request.theme.value,
            "shipping_info": request.shipping_info,
            "returns_info": request.returns_info,
            "status": ListingStatus.DRAFT.value,
        }
        listing = self._repository.create(data)

        return CreateListingResponse(
            data=listing,
            checkout_url=self.checkout_url(listing.id),
            is_draft=listing.status == ListingStatus.DRAFT,
            message=DRAFT_CREATED_MESSAGE,
        )

    async def get_listing_view(
        self,
        listing_id: str,
        viewer_id: Optional[str] = None,
    ) -> ListingView:
        listing = self._repository.get_by_id(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)

        return ListingView(
            id=listing.id,
            title=listing.title,
            story=listing.story,
            price=format_price(listing.price_cents),
            price_cents=listing.price_cents,
            image_url=listing.image_url,
            theme=listing.theme,
            shipping_info=listing.shipping_info,
            returns_info=listing.returns_info,
            status=listing.status,
            is_available=listing.is_available,
            is_creator=viewer_id is not None and viewer_id == listing.user_id,
        )

    async def buy(self, listing_id: str) -> BuyResponse:
        listing = self._repository.get_by_id(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        if not listing.is_available:
            raise ListingUnavailableError(listing_id)

        message = DRAFT_BUY_MESSAGE if listing.status == ListingStatus.DRAFT else CHECKOUT_PENDING_MESSAGE
        return BuyResponse(
            listing_id=listing.id,
            status=listing.status,
            message=message,
        )
