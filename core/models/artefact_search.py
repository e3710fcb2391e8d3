"""Derived case search index rows."""

import uuid
from typing import ClassVar

from django.db import models


class ArtefactSearch(models.Model):
    """A case number and/or case name found in an artefact's payload.

    Rows are disposable. The search extractor deletes every row for an
    artefact before writing the new set.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    artefact = models.ForeignKey(
        "core.Artefact",
        on_delete=models.CASCADE,
        related_name="search_entries",
        db_column="artefact_id",
    )
    case_number = models.CharField(max_length=255, null=True, blank=True)
    case_name = models.CharField(max_length=500, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "artefact_search"
        managed = False
        ordering: ClassVar[list[str]] = ["created_at"]
        indexes: ClassVar[list] = [
            models.Index(fields=["case_number"]),
            models.Index(fields=["case_name"]),
        ]

    def __str__(self) -> str:
        """Return string representation of search entry."""
        return f"{self.case_number or '-'} / {self.case_name or '-'}"
