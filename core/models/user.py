"""User model."""

import uuid
from typing import ClassVar

from django.db import models


class User(models.Model):
    """A registered user of the public service.

    This model is unmanaged as the account tables are owned by the
    authentication service. Only the fields needed to address a notification
    email are mapped.
    """

    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=255, null=True, blank=True)
    first_name = models.CharField(max_length=255, null=True, blank=True)
    surname = models.CharField(max_length=255, null=True, blank=True)
    user_provenance = models.CharField(max_length=50, default="", blank=True)
    role = models.CharField(max_length=50, default="VERIFIED", blank=True)
    created_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "user"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_date"]

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.user_id} ({self.email or 'no email'})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(user_id={self.user_id})>"
