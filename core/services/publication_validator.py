"""Validation of inbound blob publication submissions.

The validator never raises for bad input and never stops at the first
problem: every rule is evaluated and every violation is returned together.
"""

import re
from datetime import UTC, date, datetime
from typing import Any

import structlog

from core.constants.publication import MAX_BLOB_SIZE_BYTES
from core.enums import Language, Provenance, Sensitivity
from core.schemas.publication.validation_result import FieldError, ValidationResult
from core.services.list_type_schema_validator import ListTypeSchemaValidator
from core.services.reference_data import ReferenceData, parse_court_id

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = (
    "court_id",
    "provenance",
    "content_date",
    "list_type",
    "sensitivity",
    "language",
    "display_from",
    "display_to",
    "hearing_list",
)

ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or value is False


def parse_iso_date(value: Any) -> date | None:
    """Parse an ISO 8601 date (optionally with a time part), else None."""
    if not isinstance(value, str) or not ISO_DATE_PREFIX.match(value):
        return None
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def parse_iso_datetime(value: Any) -> datetime | None:
    """Parse an ISO 8601 date-time with an explicit ``T`` time part.

    Naive values are taken to be UTC.
    """
    if not isinstance(value, str) or "T" not in value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _allowed(enum_cls) -> str:
    return ", ".join(member.value for member in enum_cls)


class PublicationValidator:
    """Checks a blob submission against field, reference data and schema rules."""

    def __init__(
        self,
        reference_data: ReferenceData,
        schema_validator: ListTypeSchemaValidator | None = None,
        max_size_bytes: int = MAX_BLOB_SIZE_BYTES,
    ) -> None:
        self.reference_data = reference_data
        self.schema_validator = schema_validator or ListTypeSchemaValidator()
        self.max_size_bytes = max_size_bytes

    def validate(self, submission: Any, size_bytes: int) -> ValidationResult:
        """Validate one submission.

        Args:
            submission: Decoded JSON body. Anything other than an object is
                treated as an object with no fields.
            size_bytes: Size of the raw request body.

        Returns:
            ValidationResult with all violations, the location flag and the
            resolved list type id.
        """
        if not isinstance(submission, dict):
            submission = {}

        errors: list[FieldError] = []

        if size_bytes > self.max_size_bytes:
            max_mb = self.max_size_bytes // (1024 * 1024)
            errors.append(
                FieldError(
                    field="body",
                    message=f"Payload too large. Maximum size is {max_mb}MB",
                )
            )

        for field in REQUIRED_FIELDS:
            if _is_missing(submission.get(field)):
                errors.append(FieldError(field=field, message=f"{field} is required"))

        errors.extend(self._check_enum(submission, "provenance", Provenance))
        errors.extend(self._check_enum(submission, "sensitivity", Sensitivity))
        errors.extend(self._check_enum(submission, "language", Language))

        list_type_id = None
        list_type_name = submission.get("list_type")
        if not _is_missing(list_type_name):
            list_type = (
                self.reference_data.get_list_type_by_name(list_type_name)
                if isinstance(list_type_name, str)
                else None
            )
            if list_type is None:
                allowed = ", ".join(self.reference_data.list_type_names)
                errors.append(
                    FieldError(
                        field="list_type",
                        message=f"Invalid list type. Allowed values: {allowed}",
                    )
                )
            else:
                list_type_id = list_type.id

        content_date = submission.get("content_date")
        if not _is_missing(content_date) and parse_iso_date(content_date) is None:
            errors.append(
                FieldError(
                    field="content_date",
                    message="content_date must be a valid ISO 8601 date",
                )
            )

        window = {}
        for field in ("display_from", "display_to"):
            value = submission.get(field)
            if _is_missing(value):
                continue
            parsed = parse_iso_datetime(value)
            if parsed is None:
                errors.append(
                    FieldError(
                        field=field,
                        message=f"{field} must be a valid ISO 8601 datetime",
                    )
                )
            else:
                window[field] = parsed

        if len(window) == 2 and window["display_to"] < window["display_from"]:
            errors.append(
                FieldError(
                    field="display_to",
                    message="display_to must be after display_from",
                )
            )

        location_exists = False
        court_id = submission.get("court_id")
        if not _is_missing(court_id):
            location_id = parse_court_id(court_id)
            if location_id is None:
                errors.append(
                    FieldError(
                        field="court_id", message="court_id must be a valid number"
                    )
                )
            else:
                location_exists = (
                    self.reference_data.get_location(location_id) is not None
                )

        hearing_list = submission.get("hearing_list")
        if list_type_id is not None and not _is_missing(hearing_list) and not errors:
            errors.extend(self._check_schema(list_type_name, hearing_list))

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            location_exists=location_exists,
            list_type_id=list_type_id,
        )

    def _check_enum(self, submission: dict, field: str, enum_cls) -> list[FieldError]:
        value = submission.get(field)
        if _is_missing(value):
            return []
        if isinstance(value, str) and value in {m.value for m in enum_cls}:
            return []
        return [
            FieldError(
                field=field,
                message=f"Invalid {field}. Allowed values: {_allowed(enum_cls)}",
            )
        ]

    def _check_schema(
        self, list_type_name: str, hearing_list: Any
    ) -> list[FieldError]:
        try:
            messages = self.schema_validator.validate(list_type_name, hearing_list)
        except Exception as e:
            logger.error(
                "hearing_list_schema_validation_failed",
                list_type=list_type_name,
                error=str(e),
            )
            return [
                FieldError(
                    field="hearing_list",
                    message="Failed to validate hearing_list against schema",
                )
            ]
        return [FieldError(field="hearing_list", message=m) for m in messages]
