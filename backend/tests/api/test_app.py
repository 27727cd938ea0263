"""Tests for the application factory and error handling."""

from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, get_listing_service
from modules.listings.exceptions import ListingStoreError


class TestCreateApp:

    def test_container_is_on_app_state(self, container):
        app = create_app(container)
        assert app.state.container is container

    def test_routes_registered(self, app):
        paths = set(app.openapi()["paths"])
        assert {
            "/api/health",
            "/api/ready",
            "/api/check-auth",
            "/api/record-auth",
            "/api/trigger-magic-link",
            "/api/auth-confirm",
            "/auth-confirm",
            "/api/shortcut-upload",
            "/api/listings",
            "/api/listings/{listing_id}",
            "/api/listings/{listing_id}/buy",
        } <= paths

    def test_lifespan_resets_container(self, container):
        container._freshness_ledger = MagicMock()
        with TestClient(create_app(container)):
            pass
        assert container._freshness_ledger is None


class TestErrorHandler:

    def test_unhandled_module_error_uses_error_body(self, app):
        service = MagicMock()
        service.get_listing_view = AsyncMock(
            side_effect=ListingStoreError("Database error during get", service="supabase")
        )
        app.dependency_overrides[get_listing_service] = lambda: service

        response = TestClient(app).get("/api/listings/listing-1")

        assert response.status_code == 502
        assert response.json() == {
            "error": "ListingStoreError",
            "message": "Database error during get",
            "details": {"service": "supabase"},
        }


class TestServiceContainer:

    def test_services_are_cached(self, container):
        assert container.freshness_checker is container.freshness_checker
        assert container.upload_gate is container.upload_gate

    def test_gate_strategy_order(self, container):
        assert container.upload_gate.strategy_names == ["shared_secret", "freshness"]

    def test_upload_limits_from_settings(self, test_settings):
        test_settings.upload_max_images = 5
        container = ServiceContainer(test_settings)
        container._db = MagicMock()
        assert container.shortcut_uploads.limits.max_images == 5

    def test_magic_link_redirect(self, container):
        assert container.magic_link.redirect_url == "https://blink.shop/auth-confirm"

    def test_get_container_reads_app_state(self, app, container):
        request = MagicMock()
        request.app = app
        assert get_container(request) is container
