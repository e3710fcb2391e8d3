"""PDDA HTML upload validation and storage."""

import os
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from core.constants.publication import (
    PDDA_HTML_ALLOWED_EXTENSIONS,
    PDDA_HTML_ARTEFACT_TYPE,
    PDDA_HTML_KEY_PREFIX,
)
from core.services.downstream.s3_storage_client import get_s3_client

logger = structlog.get_logger(__name__)

INVALID_ARTEFACT_TYPE = "ArtefactType must be LCSU for HTM/HTML uploads"
MISSING_FILE = "Select an HTM or HTML file to upload"
INVALID_FILENAME = "Invalid filename"
INVALID_EXTENSION = "The uploaded file must be an HTM or HTML file"
FILE_TOO_LARGE = "The uploaded file is too large"
UPLOAD_FAILED = "The file could not be uploaded to storage. Try again."
UPLOAD_ACCEPTED = "Upload accepted and stored"


class PddaUploadError(Exception):
    """The upload could not be stored."""


@dataclass(frozen=True)
class PddaUploadValidation:
    valid: bool
    error: str | None = None


def validate_upload(
    artefact_type: str | None, file: UploadedFile | None
) -> PddaUploadValidation:
    """Check the artefact type and uploaded file, stopping at the first problem."""
    if artefact_type != PDDA_HTML_ARTEFACT_TYPE:
        return PddaUploadValidation(False, INVALID_ARTEFACT_TYPE)
    if file is None or not file.size:
        return PddaUploadValidation(False, MISSING_FILE)

    name = file.name or ""
    if "../" in name or "..\\" in name:
        return PddaUploadValidation(False, INVALID_FILENAME)
    if os.path.splitext(name)[1].lower() not in PDDA_HTML_ALLOWED_EXTENSIONS:
        return PddaUploadValidation(False, INVALID_EXTENSION)
    if file.size > settings.PDDA_HTML_MAX_FILE_SIZE:
        return PddaUploadValidation(False, FILE_TOO_LARGE)
    return PddaUploadValidation(True)


def build_object_key(filename: str, now: datetime | None = None) -> str:
    """``pdda-html/YYYY/MM/DD/<uuid><ext>`` with the lowercased extension."""
    now = now or datetime.now(UTC)
    ext = os.path.splitext(filename)[1].lower()
    return f"{PDDA_HTML_KEY_PREFIX}/{now:%Y/%m/%d}/{uuid.uuid4()}{ext}"


class PddaHtmlService:
    """Stores validated PDDA HTML files in S3."""

    def __init__(self, s3_client=None, bucket: str | None = None) -> None:
        self._s3_client = s3_client
        self._bucket = bucket

    @property
    def s3_client(self):
        if self._s3_client is None:
            self._s3_client = get_s3_client()
        return self._s3_client

    @property
    def bucket(self) -> str:
        return self._bucket or settings.PDDA_HTML_S3_BUCKET

    def store(self, file: UploadedFile, correlation_id: str) -> str:
        """Upload the file and return its object key.

        Raises:
            PddaUploadError: If S3 rejects the upload or is unreachable.
        """
        key = build_object_key(file.name)
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=file.read(),
                ContentType="text/html",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(
                "pdda_html_upload_failed",
                correlation_id=correlation_id,
                bucket=self.bucket,
                error=str(e),
            )
            raise PddaUploadError(str(e)) from e

        logger.info(
            "pdda_html_uploaded",
            correlation_id=correlation_id,
            bucket=self.bucket,
            s3_key=key,
            size_bytes=file.size,
        )
        return key


pdda_html_service = PddaHtmlService()
