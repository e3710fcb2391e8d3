"""Publication pipeline schemas."""

from core.schemas.publication.artefact_create import ArtefactCreate
from core.schemas.publication.artefact_detail import ArtefactDetail
from core.schemas.publication.dispatch_result import DispatchResult
from core.schemas.publication.ingestion_response import IngestionResponse
from core.schemas.publication.notification_audit import (
    NotificationAuditDetail,
    NotificationAuditListResponse,
)
from core.schemas.publication.pdda_upload import PddaUploadResponse
from core.schemas.publication.pdf_render import PdfRenderContext, PdfRenderResult
from core.schemas.publication.processing_result import PublicationProcessingResult
from core.schemas.publication.validation_result import FieldError, ValidationResult

__all__ = [
    "ArtefactCreate",
    "ArtefactDetail",
    "DispatchResult",
    "FieldError",
    "IngestionResponse",
    "NotificationAuditDetail",
    "NotificationAuditListResponse",
    "PddaUploadResponse",
    "PdfRenderContext",
    "PdfRenderResult",
    "PublicationProcessingResult",
    "ValidationResult",
]
