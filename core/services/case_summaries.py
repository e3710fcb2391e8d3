"""Per list type case summaries for subscription emails."""

from collections.abc import Callable
from typing import Any

from core.services import cause_list_formatting

CaseSummary = list[tuple[str, str]]
SummaryExtractor = Callable[[Any], list[CaseSummary]]


def _care_standards_summary(payload: Any) -> list[CaseSummary]:
    if not isinstance(payload, list):
        return []
    return [
        [
            ("Case name", hearing.get("caseName") or ""),
            ("Hearing date", hearing.get("date") or ""),
            ("Hearing type", hearing.get("hearingType") or ""),
        ]
        for hearing in payload
        if isinstance(hearing, dict)
    ]


def _civil_and_family_summary(payload: Any) -> list[CaseSummary]:
    if not isinstance(payload, dict):
        return []
    return cause_list_formatting.extract_case_summary(payload)


SUMMARY_EXTRACTORS: dict[str, SummaryExtractor] = {
    "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST": _civil_and_family_summary,
    "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST": _care_standards_summary,
}


def build_case_summary(list_type_name: str, payload: Any) -> str | None:
    """Email summary text for a payload, or None when the list type has none."""
    extractor = SUMMARY_EXTRACTORS.get(list_type_name)
    if extractor is None or payload is None:
        return None
    return cause_list_formatting.format_case_summary(extractor(payload))
