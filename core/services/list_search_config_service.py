"""Validation and storage of list type case search field names."""

import re

import structlog

from core.constants.publication import MAX_SEARCH_FIELD_NAME_LENGTH
from core.exceptions import ListTypeNotFoundError
from core.models import ListSearchConfig, ListType
from core.schemas.publication.validation_result import FieldError
from core.schemas.subscription import ListSearchConfigDetail, ListSearchConfigUpdate

logger = structlog.get_logger(__name__)

FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")

FIELD_LABELS = {
    "case_number_field_name": "Case number field name",
    "case_name_field_name": "Case name field name",
}


def validate_search_config(update: ListSearchConfigUpdate) -> list[FieldError]:
    """Check both field names; blank is allowed for one but not both."""
    errors: list[FieldError] = []
    values = {
        field: (getattr(update, field) or "").strip() for field in FIELD_LABELS
    }

    if not any(values.values()):
        errors.append(
            FieldError(
                field="case_number_field_name",
                message="Enter at least one field name",
            )
        )
        return errors

    for field, label in FIELD_LABELS.items():
        value = values[field]
        if not value:
            continue
        if len(value) > MAX_SEARCH_FIELD_NAME_LENGTH:
            errors.append(
                FieldError(
                    field=field,
                    message=(
                        f"{label} must be {MAX_SEARCH_FIELD_NAME_LENGTH} "
                        "characters or less"
                    ),
                )
            )
        elif not FIELD_NAME_PATTERN.match(value):
            errors.append(
                FieldError(
                    field=field,
                    message=(
                        f"{label} must contain only letters, numbers "
                        "and underscores"
                    ),
                )
            )
    return errors


class ListSearchConfigService:
    """Reads and upserts the search configuration of a list type."""

    @staticmethod
    def _require_list_type(list_type_id: int) -> ListType:
        try:
            return ListType.objects.get(id=list_type_id)
        except ListType.DoesNotExist as e:
            raise ListTypeNotFoundError(list_type_id) from e

    def get_config(self, list_type_id: int) -> ListSearchConfigDetail:
        """Current configuration; blank field names when none is saved."""
        self._require_list_type(list_type_id)
        config = ListSearchConfig.objects.filter(list_type_id=list_type_id).first()
        if config is None:
            return ListSearchConfigDetail(list_type_id=list_type_id)
        return ListSearchConfigDetail.model_validate(config)

    def save_config(
        self, list_type_id: int, update: ListSearchConfigUpdate
    ) -> ListSearchConfigDetail | list[FieldError]:
        """Upsert the configuration, or return the validation errors."""
        list_type = self._require_list_type(list_type_id)
        errors = validate_search_config(update)
        if errors:
            return errors

        config, created = ListSearchConfig.objects.update_or_create(
            list_type=list_type,
            defaults={
                "case_number_field_name": update.case_number_field_name.strip(),
                "case_name_field_name": update.case_name_field_name.strip(),
            },
        )
        logger.info(
            "list_search_config_saved",
            list_type_id=list_type_id,
            created=created,
        )
        return ListSearchConfigDetail.model_validate(config)


list_search_config_service = ListSearchConfigService()
