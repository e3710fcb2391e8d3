"""Per-recipient delivery record for publication notifications.

One row is written for each (artefact, subscription) pairing the dispatcher
attempts. Rows are never retried automatically.
"""

import uuid
from typing import ClassVar

from django.db import models
from django.utils import timezone

from core.enums import NotificationAuditStatus


class NotificationAuditLog(models.Model):
    """Delivery outcome of one subscription email.

    Attributes:
        notification_id: Unique identifier for the row.
        subscription_id: Subscription that matched the artefact.
        user: Recipient.
        publication_id: Artefact the email is about.
        status: Pending, Sent, Failed or Skipped.
        error_message: Last send error, or the skip reason.
        gov_notify_id: GOV.UK Notify id when the send succeeded.
        created_at: When the attempt started.
        sent_at: When the provider accepted the email.
    """

    notification_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the notification",
    )
    subscription_id = models.UUIDField(
        help_text="Subscription that matched the artefact",
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="notification_audit_logs",
        db_column="user_id",
    )
    publication_id = models.UUIDField(help_text="Artefact the notification is for")
    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in NotificationAuditStatus],
        default=NotificationAuditStatus.PENDING.value,
    )
    error_message = models.TextField(null=True, blank=True)
    gov_notify_id = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "notification_audit_log"
        managed = False
        ordering: ClassVar[list[str]] = ["created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["publication_id"]),
            models.Index(fields=["status", "-created_at"]),
        ]

    def __str__(self) -> str:
        """Return string representation of notification record."""
        return f"{self.publication_id} -> {self.user_id}: {self.status}"

    def __repr__(self) -> str:
        """Return detailed representation of notification record."""
        return (
            f"<NotificationAuditLog(notification_id={self.notification_id}, "
            f"publication_id={self.publication_id}, status={self.status})>"
        )

    def mark_sent(self, gov_notify_id: str) -> None:
        """Mark the notification as accepted by GOV.UK Notify.

        Args:
            gov_notify_id: Provider notification id.
        """
        self.status = NotificationAuditStatus.SENT.value
        self.gov_notify_id = gov_notify_id
        self.sent_at = timezone.now()
        self.save(update_fields=["status", "gov_notify_id", "sent_at"])

    def mark_failed(self, error_msg: str) -> None:
        """Mark the notification as failed after the final retry.

        Args:
            error_msg: Description of the last failure.
        """
        self.status = NotificationAuditStatus.FAILED.value
        self.error_message = error_msg
        self.save(update_fields=["status", "error_message"])
