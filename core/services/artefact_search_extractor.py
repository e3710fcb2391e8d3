"""Extraction of case numbers and names from list payloads for case search."""

from typing import Any
from uuid import UUID

from django.conf import settings

import structlog

from core.repositories.artefact_search_repository import ArtefactSearchRepository
from core.services.reference_data import ListTypeConfig, ReferenceData

logger = structlog.get_logger(__name__)

CaseRecord = tuple[str | None, str | None]


def _string_value(container: dict, field_name: str | None) -> str | None:
    if not field_name:
        return None
    value = container.get(field_name)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class ArtefactSearchExtractor:
    """Builds the artefact search index for a stored payload.

    The list type's search configuration names the payload keys holding case
    numbers and case names. A flat payload with those keys at the root yields
    one case. Otherwise the payload is walked depth first and every nested
    object carrying either key yields a case, provided at least one of the two
    values is a non-empty string.

    Extraction is best effort: failures are logged and swallowed so that
    ingestion is never blocked by indexing.
    """

    def __init__(
        self,
        reference_data: ReferenceData,
        max_depth: int | None = None,
        repository: type[ArtefactSearchRepository] = ArtefactSearchRepository,
    ) -> None:
        self.reference_data = reference_data
        if max_depth is None:
            max_depth = settings.SEARCH_EXTRACTION_MAX_DEPTH
        self.max_depth = max_depth
        self.repository = repository

    def extract(
        self, artefact_id: UUID | str, list_type_id: int, payload: Any
    ) -> None:
        """Replace the search rows for an artefact with the cases in ``payload``."""
        try:
            list_type = self.reference_data.get_list_type(list_type_id)
            if list_type is None or not list_type.has_search_config:
                logger.info(
                    "artefact_search_config_not_found",
                    artefact_id=str(artefact_id),
                    list_type_id=list_type_id,
                )
                return

            if not isinstance(payload, dict):
                logger.info(
                    "artefact_search_invalid_payload",
                    artefact_id=str(artefact_id),
                    payload_type=type(payload).__name__,
                )
                return

            cases = self.extract_cases(list_type, payload)
            stored = self.repository.replace_for_artefact(artefact_id, cases)

            if stored:
                logger.info(
                    "artefact_search_extracted",
                    artefact_id=str(artefact_id),
                    case_count=stored,
                )
            else:
                logger.info(
                    "artefact_search_no_case_data",
                    artefact_id=str(artefact_id),
                )
        except Exception as e:
            logger.error(
                "artefact_search_extraction_failed",
                artefact_id=str(artefact_id),
                list_type_id=list_type_id,
                error=str(e),
                exc_info=True,
            )

    def extract_cases(
        self, list_type: ListTypeConfig, payload: dict[str, Any]
    ) -> list[CaseRecord]:
        """Return ``(case_number, case_name)`` pairs found in a payload."""
        root_case = self._case_from(payload, list_type)
        if root_case is not None:
            return [root_case]

        cases: list[CaseRecord] = []
        truncated = False
        stack: list[tuple[Any, int]] = [(payload, 0)]

        while stack:
            node, depth = stack.pop()

            if isinstance(node, dict):
                case = self._case_from(node, list_type)
                if case is not None:
                    cases.append(case)
                children = list(node.values())
            elif isinstance(node, list):
                children = node
            else:
                continue

            if depth >= self.max_depth:
                if any(isinstance(child, (dict, list)) for child in children):
                    truncated = True
                continue

            # Reversed so that cases come out in document order
            for child in reversed(children):
                if isinstance(child, (dict, list)):
                    stack.append((child, depth + 1))

        if truncated:
            logger.warning(
                "artefact_search_depth_limit_reached",
                list_type=list_type.name,
                max_depth=self.max_depth,
            )
        return cases

    @staticmethod
    def _case_from(
        node: dict[str, Any], list_type: ListTypeConfig
    ) -> CaseRecord | None:
        number_field = list_type.case_number_field_name
        name_field = list_type.case_name_field_name
        if (number_field not in node) and (name_field not in node):
            return None

        case_number = _string_value(node, number_field)
        case_name = _string_value(node, name_field)
        if case_number is None and case_name is None:
            return None
        return case_number, case_name
