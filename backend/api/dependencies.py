"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each component receives its collaborators through its
constructor; the container is created by the application factory and
stored on app.state, so its lifecycle is the application's.

When we're ready to swap a collaborator (e.g., a different image host),
we only need to change the wiring here.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Request
from supabase import Client

from shared.config import Settings, get_settings
from shared.database import create_service_client, create_anon_client

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, ICredentialStore, IMagicLinkTrigger
    from modules.auth.confirmation import ConfirmationHandler
    from modules.freshness.interfaces import (
        IFreshnessChecker,
        IFreshnessLedger,
        IFreshnessRecorder,
    )
    from modules.shortcut.gate import HeadlessUploadGate
    from modules.shortcut.image_host import IImageHost
    from modules.shortcut.repository import UploadTrackingRepository
    from modules.shortcut.service import ShortcutUploadService
    from modules.listings.interfaces import IListingService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached for the
    lifetime of the container. Nothing touches Supabase or Cloudinary
    until a service that needs it is first requested.

    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self.reset()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def db(self) -> Client:
        """Get the service-role Supabase client."""
        if self._db is None:
            self._db = create_service_client(self._settings)
        return self._db

    @property
    def auth(self) -> "IAuthService":
        """Get the token validation service."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self._settings)
        return self._auth_service

    @property
    def credential_store(self) -> "ICredentialStore":
        """Get the Supabase Auth credential store."""
        if self._credential_store is None:
            from modules.auth.credential_store import SupabaseCredentialStore
            self._credential_store = SupabaseCredentialStore(
                self.db,
                lambda: create_anon_client(self._settings),
            )
        return self._credential_store

    @property
    def magic_link(self) -> "IMagicLinkTrigger":
        """Get the magic link trigger."""
        if self._magic_link is None:
            from modules.auth.magic_link import MagicLinkTrigger
            self._magic_link = MagicLinkTrigger(
                self.credential_store,
                redirect_url=self._settings.auth_confirm_url,
            )
        return self._magic_link

    @property
    def freshness_ledger(self) -> "IFreshnessLedger":
        """Get the authenticated_users ledger."""
        if self._freshness_ledger is None:
            from modules.freshness.repository import SupabaseFreshnessLedger
            self._freshness_ledger = SupabaseFreshnessLedger(self.db)
        return self._freshness_ledger

    @property
    def freshness_checker(self) -> "IFreshnessChecker":
        """Get the freshness checker."""
        if self._freshness_checker is None:
            from modules.freshness.service import FreshnessChecker
            self._freshness_checker = FreshnessChecker(
                self.freshness_ledger,
                window_days=self._settings.auth_freshness_days,
            )
        return self._freshness_checker

    @property
    def freshness_recorder(self) -> "IFreshnessRecorder":
        """Get the freshness recorder."""
        if self._freshness_recorder is None:
            from modules.freshness.service import FreshnessRecorder
            self._freshness_recorder = FreshnessRecorder(self.freshness_ledger, self.auth)
        return self._freshness_recorder

    @property
    def confirmation(self) -> "ConfirmationHandler":
        """Get the magic link confirmation handler."""
        if self._confirmation is None:
            from modules.auth.confirmation import ConfirmationHandler
            self._confirmation = ConfirmationHandler(
                self.credential_store,
                self.freshness_recorder,
            )
        return self._confirmation

    @property
    def upload_gate(self) -> "HeadlessUploadGate":
        """Get the headless upload gate with its ordered strategies."""
        if self._upload_gate is None:
            from modules.shortcut.gate import (
                FreshnessStrategy,
                HeadlessUploadGate,
                SharedSecretStrategy,
            )
            self._upload_gate = HeadlessUploadGate(
                strategies=[
                    SharedSecretStrategy(self._settings.shortcut_auth_secret),
                    FreshnessStrategy(self.freshness_checker),
                ],
                magic_link=self.magic_link,
            )
        return self._upload_gate

    @property
    def image_host(self) -> "IImageHost":
        """Get the Cloudinary image host."""
        if self._image_host is None:
            from modules.shortcut.image_host import CloudinaryImageHost
            self._image_host = CloudinaryImageHost(self._settings)
        return self._image_host

    @property
    def upload_tracking(self) -> "UploadTrackingRepository":
        """Get the image_uploads tracking repository."""
        if self._upload_tracking is None:
            from modules.shortcut.repository import UploadTrackingRepository
            self._upload_tracking = UploadTrackingRepository(self.db)
        return self._upload_tracking

    @property
    def shortcut_uploads(self) -> "ShortcutUploadService":
        """Get the shortcut upload service."""
        if self._shortcut_uploads is None:
            from modules.shortcut.models import UploadLimits
            from modules.shortcut.service import ShortcutUploadService
            self._shortcut_uploads = ShortcutUploadService(
                gate=self.upload_gate,
                image_host=self.image_host,
                tracking=self.upload_tracking,
                limits=UploadLimits(
                    max_images=self._settings.upload_max_images,
                    max_file_size=self._settings.upload_max_file_size,
                    max_total_size=self._settings.upload_max_total_size,
                ),
            )
        return self._shortcut_uploads

    @property
    def listings(self) -> "IListingService":
        """Get the listing service instance."""
        if self._listing_service is None:
            from modules.listings.repository import ListingRepository
            from modules.listings.service import ListingService
            self._listing_service = ListingService(
                ListingRepository(self.db),
                site_url=self._settings.site_url,
            )
        return self._listing_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db: Optional[Client] = None
        self._auth_service = None
        self._credential_store = None
        self._magic_link = None
        self._freshness_ledger = None
        self._freshness_checker = None
        self._freshness_recorder = None
        self._confirmation = None
        self._upload_gate = None
        self._image_host = None
        self._upload_tracking = None
        self._shortcut_uploads = None
        self._listing_service = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_freshness_checker(
    container: ServiceContainer = Depends(get_container),
) -> "IFreshnessChecker":
    """FastAPI dependency for the freshness checker."""
    return container.freshness_checker


def get_freshness_recorder(
    container: ServiceContainer = Depends(get_container),
) -> "IFreshnessRecorder":
    """FastAPI dependency for the freshness recorder."""
    return container.freshness_recorder


def get_magic_link_trigger(
    container: ServiceContainer = Depends(get_container),
) -> "IMagicLinkTrigger":
    """FastAPI dependency for the magic link trigger."""
    return container.magic_link


def get_confirmation_handler(
    container: ServiceContainer = Depends(get_container),
) -> "ConfirmationHandler":
    """FastAPI dependency for the confirmation handler."""
    return container.confirmation


def get_shortcut_upload_service(
    container: ServiceContainer = Depends(get_container),
) -> "ShortcutUploadService":
    """FastAPI dependency for the shortcut upload service."""
    return container.shortcut_uploads


def get_listing_service(
    container: ServiceContainer = Depends(get_container),
) -> "IListingService":
    """FastAPI dependency for the listing service."""
    return container.listings
