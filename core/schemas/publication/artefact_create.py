"""Input schema for persisting a new artefact."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from core.enums import Language, Provenance, Sensitivity


class ArtefactCreate(BaseModel):
    """Metadata for an artefact about to be inserted."""

    location_id: str = Field(..., min_length=1)
    list_type_id: int
    provenance: Provenance
    sensitivity: Sensitivity = Sensitivity.CLASSIFIED
    language: Language
    content_date: date
    display_from: datetime
    display_to: datetime
    is_flat_file: bool = False
    no_match: bool = False
