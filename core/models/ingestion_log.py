"""Append-only audit record of blob ingestion attempts."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import IngestionStatus


class IngestionLog(models.Model):
    """One row per ingestion attempt, successful or not.

    ``artefact_id`` is only set on success. Rows are never updated.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    timestamp = models.DateTimeField(auto_now_add=True)
    source_system = models.CharField(max_length=50)
    court_id = models.CharField(max_length=50)
    status = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in IngestionStatus],
    )
    error_message = models.TextField(null=True, blank=True)
    artefact_id = models.UUIDField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "ingestion_log"
        managed = False
        ordering: ClassVar[list[str]] = ["-timestamp"]
        indexes: ClassVar[list] = [
            models.Index(fields=["status", "-timestamp"]),
        ]

    def __str__(self) -> str:
        """Return string representation of ingestion log."""
        return f"{self.status} {self.source_system}/{self.court_id}"
