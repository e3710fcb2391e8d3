"""Outcome of the post-ingestion stage for one artefact."""

from pathlib import Path

from pydantic import BaseModel

from core.schemas.publication.dispatch_result import DispatchResult


class PublicationProcessingResult(BaseModel):
    pdf_path: Path | None = None
    size_bytes: int | None = None
    exceeds_max_size: bool | None = None
    pdf_error: str | None = None
    notification_result: DispatchResult | None = None
