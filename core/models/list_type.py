"""Reference data models: list types and their search configuration."""

from typing import ClassVar

from django.db import models

from core.enums import Sensitivity


class ListType(models.Model):
    """A named publication category.

    The ``name`` doubles as the key for the JSON schema used to validate
    payloads of this type (see ``core/list_type_schemas``).
    """

    id = models.IntegerField(primary_key=True)
    name = models.CharField(max_length=100, unique=True)
    friendly_name = models.CharField(max_length=255)
    welsh_friendly_name = models.CharField(max_length=255, default="", blank=True)
    shortened_friendly_name = models.CharField(max_length=255, default="", blank=True)
    url = models.CharField(max_length=255, default="", blank=True)
    default_sensitivity = models.CharField(
        max_length=20,
        choices=[(s.value, s.value) for s in Sensitivity],
        default=Sensitivity.PUBLIC.value,
    )
    allowed_provenance = models.CharField(
        max_length=255,
        default="",
        blank=True,
        help_text="Comma separated provenances allowed to publish this type",
    )
    is_non_strategic = models.BooleanField(default=False)

    class Meta:
        """Django model metadata."""

        db_table = "list_types"
        managed = False
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of list type."""
        return self.name

    def __repr__(self) -> str:
        """Return detailed representation of list type."""
        return f"<ListType(id={self.id}, name='{self.name}')>"


class ListSearchConfig(models.Model):
    """Payload field names holding case numbers and case names for a list type.

    Either field may be blank. A list type with no row here is never indexed
    for case search.
    """

    list_type = models.OneToOneField(
        ListType,
        primary_key=True,
        on_delete=models.CASCADE,
        related_name="search_config",
        db_column="list_type_id",
    )
    case_number_field_name = models.CharField(max_length=100, default="", blank=True)
    case_name_field_name = models.CharField(max_length=100, default="", blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "list_search_config"
        managed = False

    def __str__(self) -> str:
        """Return string representation of the search config."""
        return (
            f"{self.list_type_id}: number={self.case_number_field_name or '-'} "
            f"name={self.case_name_field_name or '-'}"
        )
