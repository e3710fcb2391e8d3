"""Global exception handler for the publication service API."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)
from core.exceptions.publication_exceptions import (
    ConflictError,
    InvalidSubscriptionError,
    ResourceNotFoundError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Turn exceptions raised by views into JSON error responses.

    DRF exceptions keep DRF's own handling. Domain exceptions and the
    remaining Django exceptions are mapped to
    ``{status, message, request_id, timestamp}`` bodies, except conflicts
    which carry ``{error, message, detail, ...}``.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, ResourceNotFoundError):
            response = _error(status.HTTP_404_NOT_FOUND, str(exc), request_id)
        elif isinstance(exc, InvalidSubscriptionError):
            response = _error(status.HTTP_400_BAD_REQUEST, str(exc), request_id)
        elif isinstance(exc, ConflictError):
            response = Response(
                {
                    "error": "conflict",
                    "message": str(exc),
                    "detail": exc.detail,
                    "request_id": request_id,
                    "timestamp": datetime.now(UTC).isoformat(),
                },
                status=status.HTTP_409_CONFLICT,
            )
        elif isinstance(exc, DownstreamServiceUnavailableError):
            response = _error(
                status.HTTP_503_SERVICE_UNAVAILABLE, str(exc), request_id
            )
        elif isinstance(exc, DownstreamServiceError):
            response = _error(status.HTTP_502_BAD_GATEWAY, str(exc), request_id)
        elif isinstance(exc, Http404):
            response = _error(
                status.HTTP_404_NOT_FOUND,
                "The requested resource was not found.",
                request_id,
            )
        elif isinstance(exc, PermissionDenied):
            response = _error(
                status.HTTP_403_FORBIDDEN,
                "You do not have permission to perform this action.",
                request_id,
            )
        else:
            response = _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An internal server error occurred.",
                request_id,
            )

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _error(status_code: int, message: str, request_id: str | None) -> Response:
    body = {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return Response(body, status=status_code)


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log 4xx responses as warnings and everything else as errors.

    Stack traces are included only when DEBUG is on.
    """
    log_level = logging.WARNING if response.status_code < 500 else logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {response.status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
