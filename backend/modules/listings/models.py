"""
Listing models for API requests and responses.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class ListingTheme(str, Enum):
    """Visual theme of a listing page."""
    MINIMAL = "minimal"
    DARK = "dark"
    WARM = "warm"


class ListingStatus(str, Enum):
    """Listing status enum."""
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


PURCHASABLE_STATUSES = frozenset({ListingStatus.DRAFT, ListingStatus.ACTIVE})


def is_available(status: ListingStatus, quantity: int, sold_count: int) -> bool:
    """A listing can be bought while it is draft or active and not sold out."""
    return status in PURCHASABLE_STATUSES and quantity > sold_count


def format_price(price_cents: int) -> str:
    """Format cents as a dollar amount without the currency sign, e.g. '12.50'."""
    return f"{price_cents / 100:.2f}"


class Listing(BaseModel):
    """A listing as stored in the listings table."""
    id: str
    user_id: str
    title: str
    story: Optional[str] = None
    price_cents: int
    quantity: int = 1
    sold_count: int = 0
    image_url: str
    theme: ListingTheme = ListingTheme.MINIMAL
    shipping_info: Optional[str] = None
    returns_info: Optional[str] = None
    status: ListingStatus = ListingStatus.DRAFT
    created_at: Optional[datetime] = None

    @property
    def is_available(self) -> bool:
        return is_available(self.status, self.quantity, self.sold_count)


class CreateListingRequest(BaseModel):
    """Request to create a new listing."""
    title: str = Field(..., min_length=1, max_length=200)
    price_cents: int = Field(..., description="Price in cents, at least 100")
    image_url: str = Field(..., min_length=1)
    theme: ListingTheme
    quantity: int = Field(default=1, ge=1)
    story: Optional[str] = None
    shipping_info: Optional[str] = None
    returns_info: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("price_cents")
    @classmethod
    def price_minimum(cls, value: int) -> int:
        if value < 100:
            raise ValueError("Price must be at least $1.00")
        return value

    @field_validator("story", "shipping_info", "returns_info")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class CreateListingResponse(BaseModel):
    """Response after creating a draft listing."""
    success: bool = True
    data: Listing
    checkout_url: str
    is_draft: bool
    message: str


class ListingView(BaseModel):
    """Listing as shown on its public page."""
    id: str
    title: str
    story: Optional[str] = None
    price: str
    price_cents: int
    image_url: str
    theme: ListingTheme
    shipping_info: Optional[str] = None
    returns_info: Optional[str] = None
    status: ListingStatus
    is_available: bool
    is_creator: bool


class BuyResponse(BaseModel):
    """Response from the buy button. Checkout is not implemented yet."""
    listing_id: str
    status: ListingStatus
    checkout_available: bool = False
    message: str
