"""JSON Schema validation of list payloads, one schema per list type."""

import json
import threading
from pathlib import Path
from typing import Any

import structlog
from jsonschema import Draft202012Validator

logger = structlog.get_logger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parent.parent / "list_type_schemas"


class ListTypeSchemaValidator:
    """Validates ``hearing_list`` payloads against the schema for their list type.

    Schemas live in ``core/list_type_schemas`` as ``<list-type-name>.json``
    (kebab case). Compiled validators are cached per list type name.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR) -> None:
        self.schema_dir = schema_dir
        self._validators: dict[str, Draft202012Validator | None] = {}
        self._lock = threading.Lock()

    def schema_path(self, list_type_name: str) -> Path:
        """Path of the schema file for a list type name."""
        return self.schema_dir / f"{list_type_name.lower().replace('_', '-')}.json"

    def has_schema(self, list_type_name: str) -> bool:
        """True when a schema file exists for the list type."""
        return self._get_validator(list_type_name) is not None

    def validate(self, list_type_name: str, payload: Any) -> list[str]:
        """Return human readable schema violations, empty when valid.

        Messages are prefixed with the JSON path of the offending value
        unless the violation is at the document root.
        """
        validator = self._get_validator(list_type_name)
        if validator is None:
            return [f"No JSON schema available for list type {list_type_name}"]

        messages = []
        for error in sorted(validator.iter_errors(payload), key=lambda e: e.json_path):
            if error.json_path == "$":
                messages.append(error.message)
            else:
                messages.append(f"{error.json_path}: {error.message}")
        return messages

    def _get_validator(self, list_type_name: str) -> Draft202012Validator | None:
        with self._lock:
            if list_type_name not in self._validators:
                self._validators[list_type_name] = self._load(list_type_name)
            return self._validators[list_type_name]

    def _load(self, list_type_name: str) -> Draft202012Validator | None:
        path = self.schema_path(list_type_name)
        if not path.exists():
            logger.info("list_type_schema_missing", list_type=list_type_name)
            return None
        with path.open(encoding="utf-8") as schema_file:
            schema = json.load(schema_file)
        Draft202012Validator.check_schema(schema)
        return Draft202012Validator(schema)
