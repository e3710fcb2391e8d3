"""Unit tests for structlog processors and logging setup."""

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.logging import config
from core.logging.context import (
    clear_request_id,
    set_correlation_id,
    set_request_id,
)
from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)


class TestProcessors(unittest.TestCase):
    """Tests for the custom processors."""

    def tearDown(self):
        """Clear thread-local ids."""
        clear_request_id()

    def test_add_request_context(self):
        """Test request and correlation ids are attached."""
        set_request_id("req-1")
        set_correlation_id("corr-1")

        event = add_request_context(None, "info", {"event": "blob_ingested"})

        self.assertEqual(event["request_id"], "req-1")
        self.assertEqual(event["correlation_id"], "corr-1")

    def test_explicit_correlation_id_wins(self):
        """Test that an event's own correlation id is kept."""
        set_correlation_id("bound")

        event = add_request_context(None, "info", {"correlation_id": "explicit"})

        self.assertEqual(event["correlation_id"], "explicit")

    def test_no_request_context(self):
        """Test events outside a request."""
        self.assertEqual(add_request_context(None, "info", {}), {})

    @patch.dict(os.environ, {"SERVICE_NAME": "pub", "ENVIRONMENT": "test"})
    def test_add_service_context(self):
        """Test service metadata from the environment."""
        event = add_service_context(None, "info", {})

        self.assertEqual(event, {"service_name": "pub", "environment": "test"})

    def test_add_process_info(self):
        """Test process and thread ids."""
        event = add_process_info(None, "info", {})

        self.assertEqual(event["process_id"], os.getpid())
        self.assertIn("thread_id", event)

    def test_console_renderer(self):
        """Test the console line layout."""
        line = console_renderer(
            None,
            "info",
            {
                "level": "info",
                "timestamp": "2025-03-07T10:00:00Z",
                "request_id": "req-1",
                "logger": "core.services.ingestion_service",
                "event": "blob_ingested",
                "artefact_id": "a-1",
            },
        )

        self.assertIn("[INFO", line)
        self.assertIn("req-1", line)
        self.assertIn("core.services.ingestion_service", line)
        self.assertIn("blob_ingested", line)
        self.assertIn("artefact_id=a-1", line)


class TestSetupLogging(unittest.TestCase):
    """Tests for setup_logging."""

    def setUp(self):
        """Preserve the root logger configuration."""
        root = logging.getLogger()
        self.saved_handlers = list(root.handlers)
        self.saved_level = root.level
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        """Restore the root logger configuration."""
        root = logging.getLogger()
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = self.saved_handlers
        root.setLevel(self.saved_level)
        self.tmp.cleanup()

    def test_file_and_console_handlers(self):
        """Test that both handlers are installed at the configured level."""
        log_file = Path(self.tmp.name) / "logs" / "service.log"
        env = {"LOG_FILE_PATH": str(log_file), "LOG_LEVEL": "warning"}

        with patch.dict(os.environ, env):
            config.setup_logging()

        root = logging.getLogger()
        self.assertEqual(root.level, logging.WARNING)
        self.assertEqual(len(root.handlers), 2)
        self.assertTrue(log_file.parent.exists())

    def test_console_only(self):
        """Test LOG_TO_FILE=false."""
        with patch.dict(os.environ, {"LOG_TO_FILE": "false"}):
            config.setup_logging()

        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":
    unittest.main()
