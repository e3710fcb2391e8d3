"""Thread-local request identifiers bound into every log event."""

import threading

_local = threading.local()


def set_request_id(request_id: str) -> None:
    _local.request_id = request_id


def get_request_id() -> str | None:
    return getattr(_local, "request_id", None)


def set_correlation_id(correlation_id: str) -> None:
    """Bind the upstream correlation id (PDDA uploads carry one)."""
    _local.correlation_id = correlation_id


def get_correlation_id() -> str | None:
    return getattr(_local, "correlation_id", None)


def clear_request_id() -> None:
    """Drop both identifiers so they cannot leak into the next request."""
    for name in ("request_id", "correlation_id"):
        if hasattr(_local, name):
            delattr(_local, name)
