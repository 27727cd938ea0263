"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format, as produced by BlinkshopError.to_dict()."""

    error: str
    message: str
    details: dict[str, Any] = {}
