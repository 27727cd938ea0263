"""
Listings module.

Draft listing creation, the public listing view and the placeholder buy
action.

Public API:
- IListingService: Interface for listing operations
- Listing, ListingView, CreateListingRequest: models
- ListingNotFoundError, ListingUnavailableError: exceptions
"""

from .interfaces import IListingService
from .models import (
    Listing,
    ListingStatus,
    ListingTheme,
    ListingView,
    CreateListingRequest,
    CreateListingResponse,
    BuyResponse,
    is_available,
)
from .exceptions import ListingNotFoundError, ListingUnavailableError, ListingStoreError

__all__ = [
    # Interface
    "IListingService",
    # Models
    "Listing",
    "ListingStatus",
    "ListingTheme",
    "ListingView",
    "CreateListingRequest",
    "CreateListingResponse",
    "BuyResponse",
    "is_available",
    # Exceptions
    "ListingNotFoundError",
    "ListingUnavailableError",
    "ListingStoreError",
]
