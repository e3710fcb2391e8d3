"""Artefact store: insert and key lookup of publications."""

from uuid import UUID

import structlog

from core.models import Artefact
from core.schemas.publication.artefact_create import ArtefactCreate

logger = structlog.get_logger(__name__)


class ArtefactRepository:
    """Persistence for artefacts.

    Every ``create`` is a plain insert with a freshly generated id. Submitting
    the same list twice yields two artefacts; nothing is merged or replaced.
    """

    @staticmethod
    def create(artefact: ArtefactCreate) -> UUID:
        """Insert a new artefact.

        Args:
            artefact: Validated artefact metadata.

        Returns:
            The generated artefact id.
        """
        record = Artefact.objects.create(
            location_id=artefact.location_id,
            list_type_id=artefact.list_type_id,
            provenance=artefact.provenance.value,
            sensitivity=artefact.sensitivity.value,
            language=artefact.language.value,
            content_date=artefact.content_date,
            display_from=artefact.display_from,
            display_to=artefact.display_to,
            is_flat_file=artefact.is_flat_file,
            no_match=artefact.no_match,
        )
        logger.info(
            "artefact_created",
            artefact_id=str(record.artefact_id),
            location_id=record.location_id,
            list_type_id=record.list_type_id,
            no_match=record.no_match,
        )
        return record.artefact_id

    @staticmethod
    def get(artefact_id: UUID | str) -> Artefact | None:
        """Fetch an artefact by id, or None when it does not exist."""
        try:
            return Artefact.objects.get(artefact_id=artefact_id)
        except (Artefact.DoesNotExist, ValueError):
            return None
