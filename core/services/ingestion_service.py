"""Blob ingestion: validate, persist, index and hand off for notification."""

import json
from typing import Any

from rest_framework import status

import structlog

from core.constants.publication import (
    INGESTION_NO_MATCH_MESSAGE,
    INGESTION_SUCCESS_MESSAGE,
    INGESTION_SYSTEM_ERROR_MESSAGE,
    INGESTION_VALIDATION_FAILED_MESSAGE,
)
from core.enums import IngestionStatus, Sensitivity
from core.jobs.publication_jobs import enqueue_publication_processing
from core.repositories.artefact_repository import ArtefactRepository
from core.repositories.ingestion_log_repository import IngestionLogRepository
from core.schemas.publication.artefact_create import ArtefactCreate
from core.schemas.publication.ingestion_response import IngestionResponse
from core.schemas.publication.validation_result import FieldError, ValidationResult
from core.services.artefact_search_extractor import ArtefactSearchExtractor
from core.services.publication_validator import (
    PublicationValidator,
    parse_iso_date,
    parse_iso_datetime,
)
from core.services.reference_data import ReferenceData
from core.services.temp_storage import TempStorage, temp_storage

logger = structlog.get_logger(__name__)

UNKNOWN = "UNKNOWN"


class IngestionService:
    """Runs one blob submission through the ingestion pipeline.

    Validation failures are returned as data with status 400. Once an
    artefact has been stored the remaining stages cannot fail the request.
    """

    def __init__(
        self,
        reference_data: ReferenceData | None = None,
        storage: TempStorage | None = None,
    ) -> None:
        self._reference_data = reference_data
        self.storage = storage or temp_storage

    @property
    def reference_data(self) -> ReferenceData:
        if self._reference_data is None:
            self._reference_data = ReferenceData.from_database()
        return self._reference_data

    def ingest(self, raw_body: bytes) -> tuple[IngestionResponse, int]:
        """Ingest a raw JSON request body.

        Returns:
            The response body and the HTTP status code to send.
        """
        size_bytes = len(raw_body)
        try:
            submission: Any = json.loads(raw_body or b"null")
        except (UnicodeDecodeError, ValueError):
            result = ValidationResult(
                is_valid=False,
                errors=[FieldError(field="body", message="Invalid JSON payload")],
            )
            return self._reject({}, result)

        if not isinstance(submission, dict):
            submission = {}

        result = PublicationValidator(self.reference_data).validate(
            submission, size_bytes
        )
        if not result.is_valid:
            return self._reject(submission, result)

        source_system = str(submission.get("provenance") or UNKNOWN)
        court_id = str(submission.get("court_id") or UNKNOWN)

        if result.list_type_id is None:
            IngestionLogRepository.record(
                IngestionStatus.SYSTEM_ERROR,
                source_system,
                court_id,
                error_message="List type id could not be resolved",
            )
            return self._system_error()

        try:
            no_match = not result.location_exists
            artefact_id = ArtefactRepository.create(
                ArtefactCreate(
                    location_id=court_id,
                    list_type_id=result.list_type_id,
                    provenance=submission["provenance"],
                    sensitivity=submission.get("sensitivity")
                    or Sensitivity.CLASSIFIED,
                    language=submission["language"],
                    content_date=parse_iso_date(submission["content_date"]),
                    display_from=parse_iso_datetime(submission["display_from"]),
                    display_to=parse_iso_datetime(submission["display_to"]),
                    is_flat_file=False,
                    no_match=no_match,
                )
            )
            hearing_list = submission["hearing_list"]
            self.storage.save_json(artefact_id, hearing_list)
            ArtefactSearchExtractor(self.reference_data).extract(
                artefact_id, result.list_type_id, hearing_list
            )
            IngestionLogRepository.record(
                IngestionStatus.SUCCESS,
                source_system,
                court_id,
                artefact_id=artefact_id,
            )
        except Exception as e:
            logger.error(
                "ingestion_failed",
                source_system=source_system,
                court_id=court_id,
                error=str(e),
                exc_info=True,
            )
            IngestionLogRepository.record(
                IngestionStatus.SYSTEM_ERROR,
                source_system,
                court_id,
                error_message=str(e) or type(e).__name__,
            )
            return self._system_error()

        if not no_match:
            try:
                enqueue_publication_processing(artefact_id)
            except Exception as e:
                logger.error(
                    "publication_processing_handoff_failed",
                    artefact_id=str(artefact_id),
                    error=str(e),
                )

        logger.info(
            "blob_ingested",
            artefact_id=str(artefact_id),
            list_type_id=result.list_type_id,
            court_id=court_id,
            no_match=no_match,
        )
        return (
            IngestionResponse(
                success=True,
                artefact_id=artefact_id,
                no_match=no_match,
                message=INGESTION_NO_MATCH_MESSAGE
                if no_match
                else INGESTION_SUCCESS_MESSAGE,
            ),
            status.HTTP_201_CREATED,
        )

    @staticmethod
    def _reject(
        submission: dict, result: ValidationResult
    ) -> tuple[IngestionResponse, int]:
        source_system = submission.get("provenance") or UNKNOWN
        court_id = submission.get("court_id") or UNKNOWN
        IngestionLogRepository.record(
            IngestionStatus.VALIDATION_ERROR,
            str(source_system),
            str(court_id),
            error_message=result.joined_errors(),
        )
        logger.warning(
            "blob_validation_failed",
            source_system=str(source_system),
            court_id=str(court_id),
            error_count=len(result.errors),
        )
        return (
            IngestionResponse(
                success=False,
                message=INGESTION_VALIDATION_FAILED_MESSAGE,
                errors=result.errors,
            ),
            status.HTTP_400_BAD_REQUEST,
        )

    @staticmethod
    def _system_error() -> tuple[IngestionResponse, int]:
        return (
            IngestionResponse(success=False, message=INGESTION_SYSTEM_ERROR_MESSAGE),
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
