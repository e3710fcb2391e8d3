"""Exception handling utilities for the publication service."""

from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)
from core.exceptions.handlers import custom_exception_handler
from core.exceptions.publication_exceptions import (
    ArtefactNotFoundError,
    ConflictError,
    DuplicateSubscriptionError,
    InvalidSubscriptionError,
    ListTypeNotFoundError,
    ResourceNotFoundError,
    SubscriptionLimitError,
    SubscriptionNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "ArtefactNotFoundError",
    "ConflictError",
    "DownstreamServiceError",
    "DownstreamServiceUnavailableError",
    "DuplicateSubscriptionError",
    "InvalidSubscriptionError",
    "ListTypeNotFoundError",
    "ResourceNotFoundError",
    "SubscriptionLimitError",
    "SubscriptionNotFoundError",
    "UserNotFoundError",
    "custom_exception_handler",
]
