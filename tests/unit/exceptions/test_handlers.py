"""Unit tests for exception handlers."""

import unittest
from unittest.mock import Mock, patch
from uuid import uuid4

from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated, ValidationError
from rest_framework.views import APIView

from core.exceptions import (
    ArtefactNotFoundError,
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
    DuplicateSubscriptionError,
    InvalidSubscriptionError,
    SubscriptionLimitError,
)
from core.exceptions.handlers import custom_exception_handler


@patch("core.exceptions.handlers.get_request_id", return_value="test-request-id")
class TestCustomExceptionHandler(unittest.TestCase):
    """Test cases for custom exception handler."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_request = Mock()
        self.mock_request.path = "/api/v1/publication/artefacts/x"
        self.mock_request.method = "GET"

        self.mock_view = Mock(spec=APIView)
        self.mock_view.request = self.mock_request

        self.context = {"view": self.mock_view, "request": self.mock_request}

    def test_drf_exceptions_keep_drf_handling(self, _mock_request_id):
        """Test that DRF errors are passed through."""
        response = custom_exception_handler(ValidationError("bad"), self.context)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response["X-Request-ID"], "test-request-id")

    def test_not_authenticated(self, _mock_request_id):
        """Test that missing credentials are 401."""
        response = custom_exception_handler(NotAuthenticated(), self.context)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_resource_not_found(self, _mock_request_id):
        """Test domain not found errors map to 404."""
        artefact_id = uuid4()

        response = custom_exception_handler(
            ArtefactNotFoundError(artefact_id), self.context
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["status"], 404)
        self.assertEqual(
            response.data["message"], f"Artefact with ID {artefact_id} not found"
        )
        self.assertEqual(response.data["request_id"], "test-request-id")
        self.assertIn("timestamp", response.data)

    def test_invalid_subscription(self, _mock_request_id):
        """Test unknown subscription targets map to 400."""
        response = custom_exception_handler(
            InvalidSubscriptionError("Location 1234 not found"), self.context
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Location 1234 not found")

    def test_conflicts(self, _mock_request_id):
        """Test duplicate and limit errors map to 409."""
        for exc in (
            DuplicateSubscriptionError("You are already subscribed to this court"),
            SubscriptionLimitError("Maximum 50 subscriptions allowed"),
        ):
            with self.subTest(exc=type(exc).__name__):
                response = custom_exception_handler(exc, self.context)

                self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
                self.assertEqual(response.data["error"], "conflict")
                self.assertEqual(response.data["message"], str(exc))
                self.assertIsNone(response.data["detail"])

    def test_downstream_errors(self, _mock_request_id):
        """Test third party failures map to 502 and 503."""
        unavailable = custom_exception_handler(
            DownstreamServiceUnavailableError("gov-notify", 503), self.context
        )
        rejected = custom_exception_handler(
            DownstreamServiceError("gov-notify returned 400"), self.context
        )

        self.assertEqual(unavailable.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(rejected.status_code, status.HTTP_502_BAD_GATEWAY)

    def test_handles_django_http404(self, _mock_request_id):
        """Test that Django Http404 exception is handled correctly."""
        response = custom_exception_handler(Http404("Page not found"), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertIsInstance(response.data, dict)

    def test_handles_django_permission_denied(self, _mock_request_id):
        """Test that Django PermissionDenied exception is handled correctly."""
        response = custom_exception_handler(PermissionDenied("no"), self.context)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_handles_unexpected_exception(self, _mock_request_id):
        """Test that unexpected exceptions return 500 error."""
        response = custom_exception_handler(RuntimeError("boom"), self.context)

        self.assertEqual(
            response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.assertEqual(response.data["message"], "An internal server error occurred.")

    @patch("core.exceptions.handlers.logger")
    def test_log_level_follows_status(self, mock_logger, _mock_request_id):
        """Test client errors log as warnings and server errors as errors."""
        custom_exception_handler(InvalidSubscriptionError("x"), self.context)
        custom_exception_handler(RuntimeError("boom"), self.context)

        levels = [c.args[0] for c in mock_logger.log.call_args_list]
        self.assertEqual(levels, [30, 40])

    def test_missing_view(self, _mock_request_id):
        """Test handling without a view in the context."""
        response = custom_exception_handler(RuntimeError("boom"), {})

        self.assertEqual(response.status_code, 500)


if __name__ == "__main__":
    unittest.main()
