"""Structlog setup: JSON lines to a rotating file and a coloured console."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
    redact_error_fields,
)

LOG_FILE_MAX_BYTES = 100 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 240


def _shared_processors() -> list:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
        redact_error_fields,
    ]


def setup_logging() -> None:
    """Configure structlog and the stdlib root logger.

    Ingestion and dispatch events are emitted as structured key/value pairs so
    that a single artefact can be followed through validation, persistence,
    search indexing, PDF rendering and notification.

    File output is JSON with request, service and process metadata. Console
    output is ``[LEVEL] timestamp | request_id | logger | event key=value``.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/publication-service.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - LOG_TO_FILE: Disable the JSON file handler with "false" (default: true)
    - SERVICE_NAME: Service name for metadata (default: publication-service)
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_file_path = os.getenv("LOG_FILE_PATH", "./logs/publication-service.log")
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    log_to_file = os.getenv("LOG_TO_FILE", "true").lower() != "false"

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if log_to_file:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=[
                    *_shared_processors(),
                    add_service_context,
                    add_process_info,
                ],
            )
        )
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )
    handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_file=log_file_path if log_to_file else None,
        log_level=log_level_name,
    )
