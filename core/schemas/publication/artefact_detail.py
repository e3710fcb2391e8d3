"""Response schema for artefact metadata."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ArtefactDetail(BaseSchemaModel):
    """Artefact metadata as returned by the artefact lookup endpoint."""

    artefact_id: UUID
    location_id: str
    list_type_id: int
    provenance: str
    sensitivity: str
    language: str
    content_date: date
    display_from: datetime
    display_to: datetime
    is_flat_file: bool
    no_match: bool
    last_received_date: datetime = Field(
        ..., description="When the submission was received"
    )
