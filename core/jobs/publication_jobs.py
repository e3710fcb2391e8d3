"""Background job for rendering and notifying after ingestion."""

from uuid import UUID

from django.conf import settings

import django_rq
import structlog

from core.exceptions import ArtefactNotFoundError
from core.repositories.artefact_repository import ArtefactRepository
from core.schemas.publication.pdf_render import PdfRenderContext
from core.schemas.publication.processing_result import PublicationProcessingResult
from core.services.notification_dispatcher import NotificationDispatcher
from core.services.pdf import PdfRenderer
from core.services.reference_data import ReferenceData
from core.services.temp_storage import temp_storage

logger = structlog.get_logger(__name__)


def process_publication_job(
    artefact_id: str, skip_notifications: bool = False
) -> PublicationProcessingResult:
    """Render the PDF for an artefact, then email its subscribers.

    Executed by RQ workers, or inline when asynchronous processing is off.
    Rendering and dispatch both report failures in the returned result
    rather than raising.

    Args:
        artefact_id: UUID of the stored artefact.
        skip_notifications: Render only.

    Raises:
        ArtefactNotFoundError: If the artefact does not exist.
    """
    artefact_uuid = UUID(str(artefact_id))
    artefact = ArtefactRepository.get(artefact_uuid)
    if artefact is None:
        logger.error("artefact_not_found", artefact_id=str(artefact_id))
        raise ArtefactNotFoundError(artefact_id)

    reference_data = ReferenceData.from_database()
    try:
        payload = temp_storage.load_json(artefact_uuid)
    except (OSError, ValueError) as e:
        logger.error(
            "publication_payload_unreadable",
            artefact_id=str(artefact_id),
            error=str(e),
        )
        payload = None
    list_type = reference_data.get_list_type(artefact.list_type_id)
    location = reference_data.get_location(artefact.location_id)

    result = PublicationProcessingResult()
    if list_type is not None and payload is not None:
        render = PdfRenderer(storage=temp_storage).render(
            artefact_uuid,
            payload,
            PdfRenderContext(
                list_type_name=list_type.name,
                location_name=location.name if location else "",
                welsh_location_name=location.welsh_name if location else None,
                content_date=artefact.content_date,
                language=artefact.language,
                provenance=artefact.provenance,
            ),
        )
        result.pdf_path = render.pdf_path
        result.size_bytes = render.size_bytes
        result.exceeds_max_size = render.exceeds_max_size
        result.pdf_error = render.error
        attachment = render.pdf_path if render.usable_attachment else None
    else:
        attachment = None

    if skip_notifications:
        return result

    try:
        result.notification_result = NotificationDispatcher(reference_data).dispatch(
            artefact_id=artefact_uuid,
            location_id=artefact.location_id,
            list_type_id=artefact.list_type_id,
            content_date=artefact.content_date,
            payload=payload,
            pdf_path=attachment,
        )
    except Exception as e:
        logger.error(
            "notification_dispatch_failed",
            artefact_id=str(artefact_id),
            error=str(e),
        )
    return result


def enqueue_publication_processing(
    artefact_id: UUID, skip_notifications: bool = False
) -> None:
    """Queue post-ingestion processing, or run it inline when not async."""
    if not settings.PUBLICATION_PROCESSING_ASYNC:
        process_publication_job(str(artefact_id), skip_notifications)
        return

    queue = django_rq.get_queue("default")
    job = queue.enqueue(
        process_publication_job, str(artefact_id), skip_notifications
    )
    logger.info(
        "publication_processing_enqueued",
        artefact_id=str(artefact_id),
        job_id=job.id,
    )
