"""Artefact model: one persisted court or tribunal list publication."""

import uuid
from typing import ClassVar

from django.db import models

from core.enums import Language, Provenance, Sensitivity


class Artefact(models.Model):
    """A single published list submission.

    Artefacts are written once and never updated in place. Re-ingesting the
    same list creates a new row with a new id; re-notification for an
    existing artefact goes through the resubmit endpoint instead.

    Attributes:
        artefact_id: Generated identifier returned to the submitter.
        location_id: Court id as submitted (may not exist in reference data).
        list_type_id: Resolved list type.
        provenance: Source system.
        sensitivity: Access classification, CLASSIFIED when unset.
        language: Publication language.
        content_date: Date the list covers.
        display_from: Start of the public display window.
        display_to: End of the public display window (never before display_from).
        is_flat_file: True for file uploads, False for JSON blobs.
        no_match: True when location_id is not in reference data.
        last_received_date: When this submission was received.
    """

    artefact_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the artefact",
    )
    location_id = models.CharField(
        max_length=50,
        help_text="Court or tribunal id as submitted",
    )
    list_type_id = models.IntegerField(help_text="List type id")
    provenance = models.CharField(
        max_length=50,
        choices=[(p.value, p.value) for p in Provenance],
    )
    sensitivity = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in Sensitivity],
        default=Sensitivity.CLASSIFIED.value,
    )
    language = models.CharField(
        max_length=20,
        choices=[(lang.value, lang.value) for lang in Language],
    )
    content_date = models.DateField(help_text="Date the list applies to")
    display_from = models.DateTimeField()
    display_to = models.DateTimeField()
    is_flat_file = models.BooleanField(default=False)
    no_match = models.BooleanField(
        default=False,
        help_text="Location was not found in reference data at ingestion",
    )
    last_received_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "artefact"
        managed = False
        ordering: ClassVar[list[str]] = ["-last_received_date"]
        indexes: ClassVar[list] = [
            models.Index(fields=["location_id", "list_type_id", "content_date"]),
            models.Index(fields=["display_from", "display_to"]),
        ]

    def __str__(self) -> str:
        """Return string representation of artefact."""
        return f"{self.artefact_id} ({self.list_type_id} @ {self.location_id})"

    def __repr__(self) -> str:
        """Return detailed representation of artefact."""
        return (
            f"<Artefact(artefact_id={self.artefact_id}, "
            f"list_type_id={self.list_type_id}, "
            f"location_id='{self.location_id}')>"
        )
