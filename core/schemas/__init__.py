"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.publication import (
    ArtefactDetail,
    DispatchResult,
    FieldError,
    IngestionResponse,
    NotificationAuditDetail,
    ValidationResult,
)
from core.schemas.subscription import (
    ListSearchConfigDetail,
    ListTypeSubscriptionDetail,
    SubscriptionDetail,
)

__all__ = [
    "ArtefactDetail",
    "DependencyHealth",
    "DispatchResult",
    "FieldError",
    "IngestionResponse",
    "ListSearchConfigDetail",
    "ListTypeSubscriptionDetail",
    "LivenessResponse",
    "NotificationAuditDetail",
    "ReadinessResponse",
    "SubscriptionDetail",
    "ValidationResult",
]
