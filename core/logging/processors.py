"""Custom structlog processors for request context and service metadata."""

import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from core.logging.context import get_correlation_id, get_request_id
from core.logging.redaction import redact_emails

REDACTED_FIELDS = ("error", "errors", "error_message", "response_text")

LEVEL_COLOURS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

CONSOLE_HIDDEN_FIELDS = {
    "level",
    "timestamp",
    "request_id",
    "logger",
    "event",
    "process_id",
    "thread_id",
    "service_name",
    "environment",
}


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach the request and correlation ids bound for the current request."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service_name and environment to every event."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", "publication-service")
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add process and thread identifiers.

    Notification sends run on a worker pool, so the thread id is what ties a
    send attempt back to its dispatcher thread in the JSON logs.
    """
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def redact_error_fields(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask email addresses in error text fields before rendering."""
    for field in REDACTED_FIELDS:
        value = event_dict.get(field)
        if isinstance(value, str):
            event_dict[field] = redact_emails(value)
        elif isinstance(value, list):
            event_dict[field] = [
                redact_emails(item) if isinstance(item, str) else item
                for item in value
            ]
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as ``[LEVEL] timestamp | request_id | logger | event``.

    Remaining keys are appended as ``key=value`` pairs in yellow.
    """
    init(autoreset=True)

    level = event_dict.get("level", "INFO").upper()
    level_colour = LEVEL_COLOURS.get(level, Fore.WHITE)

    formatted = (
        f"{level_colour}[{level:<8}]{Style.RESET_ALL} "
        f"{Fore.WHITE}{event_dict.get('timestamp', '')}{Style.RESET_ALL} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', 'no-request-id')}"
        f"{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extra_fields = {
        k: v for k, v in event_dict.items() if k not in CONSOLE_HIDDEN_FIELDS
    }
    if extra_fields:
        extra_str = " ".join(f"{k}={v}" for k, v in extra_fields.items())
        formatted += f" {Fore.YELLOW}{extra_str}{Style.RESET_ALL}"

    return formatted
