"""
Shortcut upload module exceptions.
"""

from typing import Optional

from shared.exceptions import ValidationError, ExternalServiceError


class ImageValidationError(ValidationError):
    """
    Raised when submitted images break an upload rule.

    The message is user-facing; the Shortcut shows it verbatim.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        details = {"index": index} if index is not None else {}
        super().__init__(message, code="INVALID_IMAGE", details=details)


class ImageUploadError(ExternalServiceError):
    """Raised when the image host rejects or fails an upload."""

    def __init__(self, filename: str):
        super().__init__(
            f"Failed to upload {filename}",
            service="cloudinary",
            code="IMAGE_UPLOAD_FAILED",
            details={"filename": filename},
        )


class UploadTrackingError(ExternalServiceError):
    """Raised when the image_uploads tracking row cannot be written."""

    pass
