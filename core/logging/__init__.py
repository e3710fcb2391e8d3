"""Logging utilities for the publication service."""

from core.logging.config import setup_logging
from core.logging.context import (
    get_correlation_id,
    get_request_id,
    set_correlation_id,
    set_request_id,
)
from core.logging.redaction import redact_emails

__all__ = [
    "get_correlation_id",
    "get_request_id",
    "redact_emails",
    "set_correlation_id",
    "set_request_id",
    "setup_logging",
]
