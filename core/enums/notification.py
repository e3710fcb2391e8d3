"""Notification-related enumerations."""

from enum import Enum


class NotificationAuditStatus(str, Enum):
    """Delivery status of one (artefact, subscription) notification.

    Rows are created as PENDING immediately before the send and finish as SENT
    or FAILED. Recipients without an email address are written directly as
    SKIPPED.
    """

    PENDING = "Pending"
    SENT = "Sent"
    FAILED = "Failed"
    SKIPPED = "Skipped"


class NotificationTemplate(str, Enum):
    """GOV.UK Notify template variants used for subscription emails."""

    SUBSCRIPTION = "SUBSCRIPTION"
    PDF_AND_SUMMARY = "PDF_AND_SUMMARY"
    SUMMARY_ONLY = "SUMMARY_ONLY"
