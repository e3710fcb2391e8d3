"""Middleware components for the publication service."""

from core.middleware.process_time import ProcessTimeMiddleware
from core.middleware.request_id import RequestIDMiddleware
from core.middleware.security import (
    SecurityContextMiddleware,
    SecurityHeadersMiddleware,
)

__all__ = [
    "ProcessTimeMiddleware",
    "RequestIDMiddleware",
    "SecurityContextMiddleware",
    "SecurityHeadersMiddleware",
]
