"""
Listing API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_listing_service
from shared.models import AuthenticatedUser

from .interfaces import IListingService
from .models import BuyResponse, CreateListingRequest, CreateListingResponse, ListingView
from .exceptions import ListingNotFoundError, ListingUnavailableError

router = APIRouter()


@router.post("", response_model=CreateListingResponse)
async def create_listing(
    request: CreateListingRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IListingService = Depends(get_listing_service),
) -> CreateListingResponse:
    """
    Create a new listing.

    Listings start as drafts until the seller finishes payment setup.
    """
    return await service.create_listing(user.id, request)


@router.get("/{listing_id}", response_model=ListingView)
async def get_listing(
    listing_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IListingService = Depends(get_listing_service),
) -> ListingView:
    """
    Get the public view of a listing.

    `is_creator` is true when the caller is the listing's seller.
    """
    try:
        return await service.get_listing_view(listing_id, user.id if user else None)
    except ListingNotFoundError:
        raise HTTPException(status_code=404, detail="Listing not found")


@router.post("/{listing_id}/buy", response_model=BuyResponse)
async def buy_listing(
    listing_id: str,
    service: IListingService = Depends(get_listing_service),
) -> BuyResponse:
    """
    Buy button. Checkout is not implemented; this reports what the buyer
    would be told.
    """
    try:
        return await service.buy(listing_id)
    except ListingNotFoundError:
        raise HTTPException(status_code=404, detail="Listing not found")
    except ListingUnavailableError as e:
        raise HTTPException(status_code=409, detail=e.message)
