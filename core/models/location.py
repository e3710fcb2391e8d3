"""Reference data models: court and tribunal locations."""

from typing import ClassVar

from django.db import models


class Location(models.Model):
    """A court or tribunal venue that publications are issued for.

    Location ids arrive on ingestion as ``court_id`` strings; a submission for
    an id not present here is accepted and flagged as ``no_match``.
    """

    location_id = models.IntegerField(primary_key=True)
    name = models.CharField(max_length=255)
    welsh_name = models.CharField(max_length=255, default="", blank=True)
    email = models.CharField(max_length=255, null=True, blank=True)
    contact_no = models.CharField(max_length=50, null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "location"
        managed = False
        ordering: ClassVar[list[str]] = ["location_id"]

    def __str__(self) -> str:
        """Return string representation of location."""
        return f"{self.location_id} - {self.name}"

    def __repr__(self) -> str:
        """Return detailed representation of location."""
        return f"<Location(location_id={self.location_id}, name='{self.name}')>"
