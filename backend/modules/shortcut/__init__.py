"""
Shortcut upload module.

Accepts base64 image uploads from the iOS Shortcut, a headless client that
authenticates either with an operator shared secret or with a fresh
magic-link login.

Public API:
- GateDecision, GateRemedy, UploadResponse, UploadLimits: models
- ImageValidationError, ImageUploadError: exceptions
"""

from .models import GateDecision, GateRemedy, UploadLimits, UploadResponse, UploadedImage
from .exceptions import ImageValidationError, ImageUploadError, UploadTrackingError

__all__ = [
    # Models
    "GateDecision",
    "GateRemedy",
    "UploadLimits",
    "UploadResponse",
    "UploadedImage",
    # Exceptions
    "ImageValidationError",
    "ImageUploadError",
    "UploadTrackingError",
]
