"""
Image host adapter for Cloudinary.

Credentials are passed on each upload call instead of through
cloudinary.config(), so no process-wide SDK state is configured.
"""

import io
import logging
import time
from typing import Protocol, runtime_checkable

import cloudinary.uploader

from shared.config import Settings

from .models import DecodedImage, UploadedImage
from .exceptions import ImageUploadError

logger = logging.getLogger(__name__)


@runtime_checkable
class IImageHost(Protocol):
    """Stores decoded images and returns their public URLs."""

    def upload(self, image: DecodedImage) -> UploadedImage:
        """
        Upload one image.

        Raises:
            ImageUploadError: If the host rejects or fails the upload
        """
        ...


def unique_public_id(image: DecodedImage) -> str:
    """Public ID of the form <epoch-ms>-<index>-image<ext>."""
    timestamp = int(time.time() * 1000)
    return f"{timestamp}-{image.index}-image{image.extension}"


class CloudinaryImageHost(IImageHost):
    """Uploads images to a Cloudinary folder, capped at 2000px wide."""

    def __init__(self, settings: Settings):
        self._cloud_name = settings.cloudinary_cloud_name
        self._api_key = settings.cloudinary_api_key
        self._api_secret = settings.cloudinary_api_secret
        self._folder = settings.cloudinary_folder

    def upload(self, image: DecodedImage) -> UploadedImage:
        public_id = unique_public_id(image)
        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(image.content),
                resource_type="auto",
                public_id=public_id,
                folder=self._folder,
                transformation=[
                    {"width": 2000, "crop": "limit"},
                    {"quality": "auto:good"},
                ],
                cloud_name=self._cloud_name,
                api_key=self._api_key,
                api_secret=self._api_secret,
            )
        except Exception as e:
            logger.error("Cloudinary upload of %s failed: %s", public_id, e)
            raise ImageUploadError(public_id) from e

        logger.info("Upload successful: %s", public_id)
        return UploadedImage(
            public_id=result["public_id"],
            secure_url=result["secure_url"],
            original_filename=f"image-{image.index}{image.extension}",
            file_size=image.size,
        )
