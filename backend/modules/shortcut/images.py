"""
Base64 image decoding and validation for Shortcut uploads.

The Shortcut sends each image as a form field holding either a bare
base64 string or a data URL (data:image/png;base64,...).
"""

import base64
import binascii
import re

from .models import DecodedImage, UploadLimits
from .exceptions import ImageValidationError

DEFAULT_MIME_TYPE = "image/jpeg"
DATA_URL_HEADER_ALLOWANCE = 256

_DATA_URL_MIME = re.compile(r"^data:([^;,]+)")


def extension_for(mime_type: str) -> str:
    """File extension for an image mime type, defaulting to .jpg."""
    if "png" in mime_type:
        return ".png"
    if "gif" in mime_type:
        return ".gif"
    if "webp" in mime_type:
        return ".webp"
    return ".jpg"


def decode_base64_image(data: str, index: int) -> DecodedImage:
    """
    Decode one submitted image.

    Raises:
        ImageValidationError: If the payload is not valid base64
    """
    payload = data.strip()
    mime_type = DEFAULT_MIME_TYPE

    if payload.startswith("data:"):
        header, _, payload = payload.partition(",")
        match = _DATA_URL_MIME.match(header)
        if match:
            mime_type = match.group(1)

    # Shortcuts wraps base64 at 76 columns; some encoders drop the padding.
    payload = "".join(payload.split())
    payload += "=" * (-len(payload) % 4)

    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ImageValidationError(
            f"Failed to process image {index + 1}. Please ensure it's a valid image.",
            index=index,
        )
    if not content:
        raise ImageValidationError(
            f"Failed to process image {index + 1}. Please ensure it's a valid image.",
            index=index,
        )

    return DecodedImage(
        index=index,
        content=content,
        mime_type=mime_type,
        extension=extension_for(mime_type),
    )


def max_encoded_size(limits: UploadLimits) -> int:
    """
    Largest form field that can still hold an image within the per-image limit.

    Covers base64 expansion, MIME line breaks and a data URL header.
    """
    encoded = 4 * -(-limits.max_file_size // 3)
    return encoded + (encoded // 76 + 1) * 2 + DATA_URL_HEADER_ALLOWANCE


def check_image_count(count: int, limits: UploadLimits) -> None:
    """
    Raises:
        ImageValidationError: If no images or too many images were sent
    """
    if count == 0:
        raise ImageValidationError("Please select at least one image")
    if count > limits.max_images:
        raise ImageValidationError(
            f"Maximum {limits.max_images} images allowed. You selected {count}."
        )


def decode_and_validate(images: list[str], limits: UploadLimits) -> list[DecodedImage]:
    """
    Decode every image and enforce per-image and total size limits.

    Validation stops at the first failing image, before anything is uploaded.

    Raises:
        ImageValidationError: On the first rule an image breaks
    """
    check_image_count(len(images), limits)

    decoded: list[DecodedImage] = []
    total_size = 0
    max_mb = limits.max_file_size // (1024 * 1024)

    for i, data in enumerate(images):
        image = decode_base64_image(data, i)

        if image.size > limits.max_file_size:
            raise ImageValidationError(
                f"Image {i + 1} is too large. Maximum size is {max_mb}MB per image.",
                index=i,
            )
        if image.mime_type not in limits.allowed_mime_types:
            raise ImageValidationError(
                f"Image {i + 1} format not supported. Please use JPG, PNG, or WebP images.",
                index=i,
            )

        total_size += image.size
        decoded.append(image)

    if total_size > limits.max_total_size:
        total_mb = limits.max_total_size // (1024 * 1024)
        raise ImageValidationError(
            f"Total file size too large. Maximum is {total_mb}MB for all images combined."
        )

    return decoded
