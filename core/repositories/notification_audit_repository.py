"""Notification audit log persistence."""

from uuid import UUID

from django.db.models import QuerySet

from core.enums import NotificationAuditStatus
from core.models import NotificationAuditLog


class NotificationAuditRepository:
    """Writes and reads per-recipient notification outcomes."""

    @staticmethod
    def create_pending(
        subscription_id: UUID, user_id: UUID, publication_id: UUID
    ) -> NotificationAuditLog:
        return NotificationAuditLog.objects.create(
            subscription_id=subscription_id,
            user_id=user_id,
            publication_id=publication_id,
            status=NotificationAuditStatus.PENDING.value,
        )

    @staticmethod
    def create_skipped(
        subscription_id: UUID, user_id: UUID, publication_id: UUID, reason: str
    ) -> NotificationAuditLog:
        return NotificationAuditLog.objects.create(
            subscription_id=subscription_id,
            user_id=user_id,
            publication_id=publication_id,
            status=NotificationAuditStatus.SKIPPED.value,
            error_message=reason,
        )

    @staticmethod
    def for_publication(publication_id: UUID) -> QuerySet[NotificationAuditLog]:
        """Audit rows for an artefact, oldest first."""
        return NotificationAuditLog.objects.filter(publication_id=publication_id)
