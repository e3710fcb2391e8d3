"""Response schema for PDDA HTML uploads."""

from pydantic import BaseModel


class PddaUploadResponse(BaseModel):
    success: bool
    message: str
    s3_key: str | None = None
    correlation_id: str
