"""Local temporary storage for raw payloads and rendered PDFs."""

import json
from pathlib import Path
from typing import Any
from uuid import UUID

from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)


class TempStorage:
    """Files kept under ``TEMP_STORAGE_ROOT`` and named by artefact id.

    ``<artefact_id>.json`` holds the submitted ``hearing_list`` and
    ``<artefact_id>.pdf`` the rendered list, when one is produced.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        """Storage directory, read from settings unless given explicitly."""
        return self._root or Path(settings.TEMP_STORAGE_ROOT)

    def json_path(self, artefact_id: UUID | str) -> Path:
        return self.root / f"{artefact_id}.json"

    def pdf_path(self, artefact_id: UUID | str) -> Path:
        return self.root / f"{artefact_id}.pdf"

    def save_json(self, artefact_id: UUID | str, payload: Any) -> Path:
        """Write the payload as ``<artefact_id>.json`` and return its path."""
        path = self.json_path(artefact_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        logger.info("payload_saved", artefact_id=str(artefact_id), path=str(path))
        return path

    def load_json(self, artefact_id: UUID | str) -> Any | None:
        """Read a saved payload back, or None when there is none."""
        path = self.json_path(artefact_id)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def write_pdf(self, artefact_id: UUID | str, content: bytes) -> Path:
        """Write rendered PDF bytes and return the file path."""
        path = self.pdf_path(artefact_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path


temp_storage = TempStorage()
