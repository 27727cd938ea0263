"""Tests for image upload tracking."""

import pytest
from unittest.mock import MagicMock

from modules.shortcut.exceptions import UploadTrackingError
from modules.shortcut.repository import UploadTrackingRepository


class TestUploadTrackingRepository:

    def test_record_batch_inserts_draft_row(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            {"id": "row-1", "email": "a@x.com", "public_ids": ["p1"], "status": "draft"}
        ]
        repo = UploadTrackingRepository(mock_db)

        row = repo.record_batch("a@x.com", ["p1"])

        mock_db.table.assert_called_with("image_uploads")
        mock_db.table.return_value.insert.assert_called_once_with({
            "public_ids": ["p1"],
            "status": "draft",
            "email": "a@x.com",
            "listing_id": None,
        })
        assert row["id"] == "row-1"

    def test_insert_failure(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.side_effect = Exception("down")
        repo = UploadTrackingRepository(mock_db)

        with pytest.raises(UploadTrackingError):
            repo.record_batch("a@x.com", ["p1"])
