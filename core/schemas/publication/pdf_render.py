"""Schemas exchanged with the PDF renderer."""

from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field


class PdfRenderContext(BaseModel):
    """Artefact metadata the renderer needs alongside the payload."""

    list_type_name: str
    location_name: str = ""
    welsh_location_name: str | None = None
    content_date: date
    language: str = "ENGLISH"
    provenance: str = ""


class PdfRenderResult(BaseModel):
    """Outcome of one render call; every field is unset for a no-op."""

    pdf_path: Path | None = None
    size_bytes: int | None = None
    exceeds_max_size: bool | None = None
    error: str | None = Field(None, description="Normalised failure message")

    @property
    def usable_attachment(self) -> bool:
        """A PDF exists and is small enough to attach to an email."""
        return (
            self.pdf_path is not None
            and self.error is None
            and not self.exceeds_max_size
        )
