"""Queries over the derived artefact case search table."""

from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from core.models import ArtefactSearch


class ArtefactSearchRepository:
    """Read and replace case search rows."""

    @staticmethod
    def replace_for_artefact(
        artefact_id: UUID | str, cases: list[tuple[str | None, str | None]]
    ) -> int:
        """Delete all rows for the artefact, then insert one row per case.

        Args:
            artefact_id: Artefact the rows belong to.
            cases: ``(case_number, case_name)`` pairs.

        Returns:
            Number of rows inserted.
        """
        with transaction.atomic():
            ArtefactSearch.objects.filter(artefact_id=artefact_id).delete()
            ArtefactSearch.objects.bulk_create(
                [
                    ArtefactSearch(
                        artefact_id=artefact_id,
                        case_number=case_number,
                        case_name=case_name,
                    )
                    for case_number, case_name in cases
                ]
            )
        return len(cases)

    @staticmethod
    def for_artefact(artefact_id: UUID | str) -> QuerySet[ArtefactSearch]:
        """All search rows for one artefact."""
        return ArtefactSearch.objects.filter(artefact_id=artefact_id)

    @staticmethod
    def find_by_case_number(case_number: str) -> QuerySet[ArtefactSearch]:
        """Rows whose case number matches exactly."""
        return ArtefactSearch.objects.filter(case_number=case_number)

    @staticmethod
    def find_by_case_name(case_name: str) -> QuerySet[ArtefactSearch]:
        """Rows whose case name contains the text, ignoring case."""
        return ArtefactSearch.objects.filter(case_name__icontains=case_name)
