"""
Shortcut upload data models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class GateRemedy(str, Enum):
    """What a denied headless client should do next."""

    CHECK_EMAIL = "check_email"
    AUTH_FAILED = "auth_failed"


class GateDecision(BaseModel):
    """Outcome of the headless upload gate."""

    authorized: bool
    strategy: Optional[str] = Field(None, description="Strategy that authorized the caller")
    remedy: Optional[GateRemedy] = None
    message: str = ""


@dataclass(frozen=True)
class DecodedImage:
    """A base64 image decoded and validated in memory."""

    index: int
    content: bytes
    mime_type: str
    extension: str

    @property
    def size(self) -> int:
        return len(self.content)


class UploadLimits(BaseModel):
    """Limits applied to a single shortcut upload."""

    max_images: int = 3
    max_file_size: int = 5 * 1024 * 1024
    max_total_size: int = 15 * 1024 * 1024
    allowed_mime_types: list[str] = [
        "image/jpeg",
        "image/png",
        "image/gif",
        "image/webp",
    ]


class UploadedImage(BaseModel):
    """An image stored on the image host."""

    public_id: str
    secure_url: str
    original_filename: str
    file_size: int


class UploadResponse(BaseModel):
    """Response returned to the iOS Shortcut."""

    success: bool
    message: str
    action: Optional[GateRemedy] = None
    images: list[UploadedImage] = []
    urls: list[str] = []
    total_files: int = 0
