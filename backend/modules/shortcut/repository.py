"""
Image upload tracking repository.

Rows in image_uploads link a batch of Cloudinary public IDs to the
uploader's email until a listing claims them.
"""

from typing import Any, Optional

from shared.repository import BaseRepository
from .exceptions import UploadTrackingError


class UploadTrackingRepository(BaseRepository[dict]):
    """Writes image_uploads rows."""

    table_name = "image_uploads"
    error_class = UploadTrackingError

    def record_batch(
        self,
        email: str,
        public_ids: list[str],
        listing_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Insert a tracking row for an uploaded batch in draft status.

        Returns:
            The inserted row.
        """
        data = {
            "public_ids": public_ids,
            "status": "draft",
            "email": email,
            "listing_id": listing_id,
        }
        result = self._execute("insert", lambda: self._table().insert(data).execute())
        return result.data[0] if result.data else data
