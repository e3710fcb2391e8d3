"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.notification import NotificationAuditStatus, NotificationTemplate
from core.enums.publication import (
    IngestionStatus,
    Language,
    Provenance,
    Sensitivity,
)
from core.enums.subscription import SearchType

__all__ = [
    "HealthStatus",
    "IngestionStatus",
    "Language",
    "NotificationAuditStatus",
    "NotificationTemplate",
    "Provenance",
    "SearchType",
    "Sensitivity",
]
