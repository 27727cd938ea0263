"""Tests for the listing service."""

import pytest
from unittest.mock import MagicMock

from modules.listings.exceptions import ListingNotFoundError, ListingUnavailableError
from modules.listings.models import CreateListingRequest, Listing, ListingStatus
from modules.listings.service import (
    CHECKOUT_PENDING_MESSAGE,
    DRAFT_BUY_MESSAGE,
    DRAFT_CREATED_MESSAGE,
    ListingService,
)


def make_listing(**overrides) -> Listing:
    data = {
        "id": "listing-1",
        "user_id": "user-1",
        "title": "Handmade mug",
        "price_cents": 2500,
        "image_url": "https://res.cloudinary.com/demo/mug.jpg",
    }
    data.update(overrides)
    return Listing(**data)


@pytest.fixture
def repository() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(repository) -> ListingService:
    return ListingService(repository, site_url="https://blink.shop/")


class TestCreateListing:

    @pytest.mark.asyncio
    async def test_creates_draft(self, service, repository):
        repository.create.return_value = make_listing()
        request = CreateListingRequest(
            title="Handmade mug",
            price_cents=2500,
            image_url="https://res.cloudinary.com/demo/mug.jpg",
            theme="minimal",
        )

        response = await service.create_listing("user-1", request)

        data = repository.create.call_args.args[0]
        assert data["status"] == "draft"
        assert data["user_id"] == "user-1"
        assert data["theme"] == "minimal"
        assert response.is_draft is True
        assert response.checkout_url == "https://blink.shop/listing/listing-1"
        assert response.message == DRAFT_CREATED_MESSAGE


class TestGetListingView:

    @pytest.mark.asyncio
    async def test_view_for_creator(self, service, repository):
        repository.get_by_id.return_value = make_listing(price_cents=1250)

        view = await service.get_listing_view("listing-1", viewer_id="user-1")

        assert view.is_creator is True
        assert view.price == "12.50"
        assert view.is_available is True

    @pytest.mark.asyncio
    async def test_view_for_anonymous_buyer(self, service, repository):
        repository.get_by_id.return_value = make_listing()

        view = await service.get_listing_view("listing-1")

        assert view.is_creator is False

    @pytest.mark.asyncio
    async def test_not_found(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(ListingNotFoundError):
            await service.get_listing_view("missing")


class TestBuy:

    @pytest.mark.asyncio
    async def test_draft_listing(self, service, repository):
        repository.get_by_id.return_value = make_listing()

        response = await service.buy("listing-1")

        assert response.checkout_available is False
        assert response.message == DRAFT_BUY_MESSAGE

    @pytest.mark.asyncio
    async def test_active_listing(self, service, repository):
        repository.get_by_id.return_value = make_listing(status=ListingStatus.ACTIVE)

        response = await service.buy("listing-1")

        assert response.message == CHECKOUT_PENDING_MESSAGE

    @pytest.mark.asyncio
    async def test_sold_out(self, service, repository):
        repository.get_by_id.return_value = make_listing(quantity=2, sold_count=2)

        with pytest.raises(ListingUnavailableError):
            await service.buy("listing-1")

    @pytest.mark.asyncio
    async def test_not_found(self, service, repository):
        repository.get_by_id.return_value = None

        with pytest.raises(ListingNotFoundError):
            await service.buy("missing")
