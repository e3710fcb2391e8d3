"""Dispatch from list type to PDF layout."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import structlog

from core.constants import CIVIL_AND_FAMILY_DAILY_CAUSE_LIST, MAX_PDF_SIZE_BYTES
from core.schemas.publication.pdf_render import PdfRenderContext, PdfRenderResult
from core.services.pdf import civil_and_family_daily_cause_list
from core.services.temp_storage import TempStorage, temp_storage

logger = structlog.get_logger(__name__)

LayoutBuilder = Callable[[Any, PdfRenderContext], bytes]

LAYOUTS: dict[str, LayoutBuilder] = {
    CIVIL_AND_FAMILY_DAILY_CAUSE_LIST: civil_and_family_daily_cause_list.build,
}


class PdfRenderer:
    """Render list payloads to PDF files in temporary storage.

    Only list types with a registered layout produce output. Failures are
    returned as an ``error`` string so that the caller can carry on.
    """

    def __init__(
        self,
        storage: TempStorage | None = None,
        layouts: dict[str, LayoutBuilder] | None = None,
        max_size_bytes: int = MAX_PDF_SIZE_BYTES,
    ) -> None:
        self.storage = storage or temp_storage
        self.layouts = LAYOUTS if layouts is None else layouts
        self.max_size_bytes = max_size_bytes

    def supports(self, list_type_name: str) -> bool:
        return list_type_name in self.layouts

    def render(
        self, artefact_id: UUID | str, payload: Any, context: PdfRenderContext
    ) -> PdfRenderResult:
        builder = self.layouts.get(context.list_type_name)
        if builder is None:
            return PdfRenderResult()

        try:
            content = builder(payload, context)
            path = self.storage.write_pdf(artefact_id, content)
        except Exception as e:
            message = str(e) or "Unknown error"
            logger.error(
                "pdf_render_failed",
                artefact_id=str(artefact_id),
                list_type=context.list_type_name,
                error=message,
            )
            return PdfRenderResult(error=f"Failed to generate PDF: {message}")

        size_bytes = len(content)
        exceeds = size_bytes > self.max_size_bytes
        log = logger.warning if exceeds else logger.info
        log(
            "pdf_rendered",
            artefact_id=str(artefact_id),
            list_type=context.list_type_name,
            size_bytes=size_bytes,
            exceeds_max_size=exceeds,
        )
        return PdfRenderResult(
            pdf_path=path, size_bytes=size_bytes, exceeds_max_size=exceeds
        )


pdf_renderer = PdfRenderer()
