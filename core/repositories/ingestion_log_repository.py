"""Ingestion attempt audit trail."""

from uuid import UUID

from core.enums import IngestionStatus
from core.models import IngestionLog


class IngestionLogRepository:
    @staticmethod
    def record(
        status: IngestionStatus,
        source_system: str,
        court_id: str,
        error_message: str | None = None,
        artefact_id: UUID | None = None,
    ) -> IngestionLog:
        """Append one ingestion log row."""
        return IngestionLog.objects.create(
            status=status.value,
            source_system=source_system[:50],
            court_id=court_id[:50],
            error_message=error_message,
            artefact_id=artefact_id,
        )
