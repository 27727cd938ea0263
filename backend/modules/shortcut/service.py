"""
Shortcut upload service.

Orchestrates a headless upload: image count check, the authorization
gate, decoding and validation, upload to the image host, and a tracking
row for the batch.
"""

import asyncio
import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shared.exceptions import ExternalServiceError

from .gate import HeadlessUploadGate
from .image_host import IImageHost
from .images import check_image_count, decode_and_validate
from .models import UploadLimits, UploadResponse
from .repository import UploadTrackingRepository

logger = logging.getLogger(__name__)


class ShortcutUploadService:
    """Handles uploads from the iOS Shortcut."""

    def __init__(
        self,
        gate: HeadlessUploadGate,
        image_host: IImageHost,
        tracking: UploadTrackingRepository,
        limits: Optional[UploadLimits] = None,
    ):
        self._gate = gate
        self._image_host = image_host
        self._tracking = tracking
        self._limits = limits or UploadLimits()

    @property
    def limits(self) -> UploadLimits:
        return self._limits

    async def upload(
        self,
        email: str,
        images: list[str],
        auth_header: Optional[str],
    ) -> UploadResponse:
        """
        Authorize and upload a batch of base64 images.

        Args:
            email: Normalized uploader email
            images: Raw base64 strings or data URLs, in form order
            auth_header: Raw Authorization header, if any

        Returns:
            UploadResponse; a denial carries `action` instead of images.

        Raises:
            ImageValidationError: If the batch breaks an upload rule
            ImageUploadError: If the image host fails
        """
        check_image_count(len(images), self._limits)

        decision = await self._gate.authorize(email, auth_header)
        if not decision.authorized:
            return UploadResponse(
                success=False,
                message=decision.message,
                action=decision.remedy,
            )

        logger.info("User %s authorized via %s, processing %d images", email, decision.strategy, len(images))
        decoded = decode_and_validate(images, self._limits)

        # The Cloudinary SDK is synchronous; each upload runs on a worker thread.
        uploaded = await asyncio.gather(
            *(run_in_threadpool(self._image_host.upload, image) for image in decoded)
        )
        public_ids = [u.public_id for u in uploaded]

        self._track_batch(email, public_ids)

        count = len(uploaded)
        return UploadResponse(
            success=True,
            message=(
                f"Successfully uploaded {count} image{'s' if count > 1 else ''}! "
                "Your images are ready to use."
            ),
            images=uploaded,
            urls=[u.secure_url for u in uploaded],
            total_files=count,
        )

    def _track_batch(self, email: str, public_ids: list[str]) -> None:
        """Best-effort: the images are already stored, so a tracking failure is not fatal."""
        try:
            self._tracking.record_batch(email, public_ids)
        except ExternalServiceError as e:
            logger.error("Failed to store tracking data for %s: %s", email, e.message)
