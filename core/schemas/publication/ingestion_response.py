"""Blob ingestion response body."""

from uuid import UUID

from pydantic import BaseModel

from core.schemas.publication.validation_result import FieldError


class IngestionResponse(BaseModel):
    """Body returned by the blob ingestion endpoint."""

    success: bool
    message: str
    artefact_id: UUID | None = None
    no_match: bool | None = None
    errors: list[FieldError] | None = None
