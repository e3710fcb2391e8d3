"""Subscription models: a user's standing interest in publications."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import Language, SearchType


class Subscription(models.Model):
    """Location or case subscription.

    ``search_value`` holds a location id for LOCATION_ID subscriptions, a
    case number for CASE_NUMBER and a case name for CASE_NAME. A user can
    hold at most one subscription per (search_type, search_value).
    """

    subscription_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="subscriptions",
        db_column="user_id",
    )
    search_type = models.CharField(
        max_length=20,
        choices=[(t.value, t.value) for t in SearchType],
    )
    search_value = models.CharField(max_length=255)
    case_name = models.CharField(max_length=500, null=True, blank=True)
    case_number = models.CharField(max_length=255, null=True, blank=True)
    date_added = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "subscription"
        managed = False
        ordering: ClassVar[list[str]] = ["-date_added"]
        unique_together: ClassVar[list[list[str]]] = [
            ["user", "search_type", "search_value"]
        ]
        indexes: ClassVar[list] = [
            models.Index(fields=["search_type", "search_value"]),
        ]

    def __str__(self) -> str:
        """Return string representation of subscription."""
        return f"{self.search_type}={self.search_value}"

    def __repr__(self) -> str:
        """Return detailed representation of subscription."""
        return (
            f"<Subscription(subscription_id={self.subscription_id}, "
            f"user_id={self.user_id}, {self.search_type}='{self.search_value}')>"
        )


class SubscriptionListType(models.Model):
    """List type subscription for one language."""

    list_type_subscription_id = models.UUIDField(
        primary_key=True, default=uuid.uuid4, editable=False
    )
    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="list_type_subscriptions",
        db_column="user_id",
    )
    list_type_id = models.IntegerField()
    language = models.CharField(
        max_length=20,
        choices=[(lang.value, lang.value) for lang in Language],
    )
    date_added = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "subscription_list_type"
        managed = False
        ordering: ClassVar[list[str]] = ["-date_added"]
        unique_together: ClassVar[list[list[str]]] = [
            ["user", "list_type_id", "language"]
        ]

    def __str__(self) -> str:
        """Return string representation of list type subscription."""
        return f"list type {self.list_type_id} ({self.language})"
