"""
iOS Shortcut upload endpoints.

The Shortcut posts multipart form data: an `email` field plus one or
more `file*` fields holding base64 images. Authentication denials and
image rule violations are returned as 200 responses with success=false
so the Shortcut can show the message instead of failing.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from api.dependencies import get_shortcut_upload_service
from shared.exceptions import ExternalServiceError, ValidationError
from shared.models import normalize_email

from .models import UploadResponse
from .service import ShortcutUploadService
from .exceptions import ImageValidationError
from .images import max_encoded_size

logger = logging.getLogger(__name__)

router = APIRouter()


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=UploadResponse(success=False, message=message).model_dump(mode="json"),
    )


@router.post("", response_model=UploadResponse)
async def shortcut_upload(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    service: ShortcutUploadService = Depends(get_shortcut_upload_service),
):
    """
    Upload base64 images on behalf of an email.

    When the caller is not authorized a magic link is emailed and the
    response carries `action: "check_email"`; the Shortcut should be run
    again once the link is confirmed.
    """
    # Images arrive as text fields, well past Starlette's 1MB default part size.
    try:
        form = await request.form(max_part_size=max_encoded_size(service.limits))
    except HTTPException as e:
        return _failure(e.status_code, str(e.detail))

    try:
        email = normalize_email(form.get("email"))
    except ValidationError as e:
        message = "Email address is required" if e.code == "EMAIL_REQUIRED" else e.message
        return _failure(400, message)

    images = [
        value
        for key, value in form.multi_items()
        if key.startswith("file") and isinstance(value, str)
    ]
    logger.info("Processing upload for %s: %d base64 images", email, len(images))

    try:
        return await service.upload(email, images, authorization)
    except ImageValidationError as e:
        return UploadResponse(success=False, message=e.message)
    except ExternalServiceError as e:
        logger.error("Upload error for %s: %s", email, e.message)
        return _failure(500, "Upload failed. Please try again.")


@router.get("")
async def describe_shortcut_upload(
    service: ShortcutUploadService = Depends(get_shortcut_upload_service),
) -> dict:
    """Describe upload limits for Shortcut authors."""
    limits = service.limits
    return {
        "message": "Blink.shop Upload API (Base64 support)",
        "limits": {
            "maxImages": limits.max_images,
            "maxFileSize": f"{limits.max_file_size // (1024 * 1024)}MB per image",
            "maxTotalSize": f"{limits.max_total_size // (1024 * 1024)}MB total",
            "allowedTypes": limits.allowed_mime_types,
        },
    }
