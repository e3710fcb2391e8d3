"""Unit tests for ProcessTimeMiddleware."""

import unittest
from unittest.mock import patch

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER
from core.middleware.process_time import ProcessTimeMiddleware


class TestProcessTimeMiddleware(unittest.TestCase):
    """Test cases for ProcessTimeMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.middleware = ProcessTimeMiddleware(lambda _request: HttpResponse("OK"))
        self.request = HttpRequest()
        self.request.method = "GET"
        self.request.path = "/api/v1/publication/health/live"

    def test_adds_process_time_header(self):
        """Test the header carries elapsed seconds."""
        response = self.middleware(self.request)

        self.assertGreaterEqual(float(response[PROCESS_TIME_HEADER]), 0.0)

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter", side_effect=[0.0, 2.5])
    def test_logs_slow_requests(self, _mock_clock, mock_logger):
        """Test the slow request warning."""
        response = self.middleware(self.request)

        self.assertEqual(response[PROCESS_TIME_HEADER], "2.500000")
        mock_logger.warning.assert_called_once_with(
            "slow_request",
            method="GET",
            path="/api/v1/publication/health/live",
            duration_seconds=2.5,
            threshold_seconds=1.0,
        )

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter", side_effect=[0.0, 0.2])
    def test_fast_requests_not_logged(self, _mock_clock, mock_logger):
        """Test that quick requests are silent."""
        self.middleware(self.request)

        mock_logger.warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
