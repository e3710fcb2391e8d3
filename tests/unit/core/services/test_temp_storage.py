"""Unit tests for temporary payload and PDF storage."""

import tempfile
import unittest
from pathlib import Path
from uuid import uuid4

from django.test import override_settings

from core.services.temp_storage import TempStorage


class TestTempStorage(unittest.TestCase):
    """Tests for TempStorage."""

    def setUp(self):
        """Set up test fixtures."""
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.storage = TempStorage(root=Path(self.tmp.name) / "uploads")
        self.artefact_id = uuid4()

    def test_json_round_trip(self):
        """Test that saved payloads load back unchanged."""
        payload = {"venue": {"venueName": "Llys Ynadon Caerdydd"}}

        path = self.storage.save_json(self.artefact_id, payload)

        self.assertEqual(path.name, f"{self.artefact_id}.json")
        self.assertEqual(self.storage.load_json(self.artefact_id), payload)

    def test_load_missing_payload_returns_none(self):
        """Test that an unknown artefact has no payload."""
        self.assertIsNone(self.storage.load_json(uuid4()))

    def test_write_pdf(self):
        """Test that PDFs are written next to payloads."""
        path = self.storage.write_pdf(self.artefact_id, b"%PDF-1.4")

        self.assertEqual(path, self.storage.pdf_path(self.artefact_id))
        self.assertEqual(path.read_bytes(), b"%PDF-1.4")

    def test_root_defaults_to_settings(self):
        """Test that the storage root follows TEMP_STORAGE_ROOT."""
        with override_settings(TEMP_STORAGE_ROOT=self.tmp.name):
            self.assertEqual(TempStorage().root, Path(self.tmp.name))


if __name__ == "__main__":
    unittest.main()
