"""
Listings module exceptions.
"""

from shared.exceptions import (
    BlinkshopError,
    NotFoundError,
    ExternalServiceError,
)


class ListingNotFoundError(NotFoundError):
    """Raised when a listing is not found."""

    def __init__(self, listing_id: str):
        super().__init__(
            f"Listing not found: {listing_id}",
            code="LISTING_NOT_FOUND",
            details={"listing_id": listing_id},
        )


class ListingUnavailableError(BlinkshopError):
    """Raised when buying a listing that is sold out or withdrawn."""

    status_code = 409

    def __init__(self, listing_id: str):
        super().__init__(
            "This item is no longer available",
            code="LISTING_UNAVAILABLE",
            details={"listing_id": listing_id},
        )


class ListingStoreError(ExternalServiceError):
    """Raised when the listings table cannot be read or written."""

    pass
