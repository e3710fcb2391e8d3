"""Database models for core application."""

from core.models.artefact import Artefact
from core.models.artefact_search import ArtefactSearch
from core.models.ingestion_log import IngestionLog
from core.models.list_type import ListSearchConfig, ListType
from core.models.location import Location
from core.models.notification_audit_log import NotificationAuditLog
from core.models.subscription import Subscription, SubscriptionListType
from core.models.user import User

__all__ = [
    "Artefact",
    "ArtefactSearch",
    "IngestionLog",
    "ListSearchConfig",
    "ListType",
    "Location",
    "NotificationAuditLog",
    "Subscription",
    "SubscriptionListType",
    "User",
]
