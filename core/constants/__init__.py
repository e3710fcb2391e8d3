"""Constants package for core application."""

from core.constants.http import (
    CORRELATION_ID_HEADER,
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)
from core.constants.publication import (
    CIVIL_AND_FAMILY_DAILY_CAUSE_LIST,
    MAX_BLOB_SIZE_BYTES,
    MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER,
    MAX_PDF_SIZE_BYTES,
    MAX_SUBSCRIPTIONS_PER_USER,
    SKIPPED_NO_EMAIL_MESSAGE,
)

__all__ = [
    "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST",
    "CORRELATION_ID_HEADER",
    "MAX_BLOB_SIZE_BYTES",
    "MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER",
    "MAX_PDF_SIZE_BYTES",
    "MAX_SUBSCRIPTIONS_PER_USER",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SECURITY_HEADERS",
    "SKIPPED_NO_EMAIL_MESSAGE",
    "SLOW_REQUEST_THRESHOLD",
]
