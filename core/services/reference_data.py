"""Immutable snapshot of list type and location reference data.

Pipeline components receive a ``ReferenceData`` instance at construction time
rather than querying reference tables themselves, so a single ingestion run
sees one consistent view and tests can build the snapshot by hand.
"""

import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from core.models import ListSearchConfig, ListType, Location

LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def parse_court_id(value: Any) -> int | None:
    """Read the leading integer of a court id, as submitters pad them freely."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else None


class ListTypeConfig(BaseModel):
    """List type metadata plus its case search field names."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    friendly_name: str
    welsh_friendly_name: str = ""
    case_number_field_name: str | None = None
    case_name_field_name: str | None = None

    @property
    def has_search_config(self) -> bool:
        """True when at least one case field name is configured."""
        return bool(self.case_number_field_name or self.case_name_field_name)


class LocationRecord(BaseModel):
    """A court or tribunal venue."""

    model_config = ConfigDict(frozen=True)

    location_id: int
    name: str
    welsh_name: str = ""


class ReferenceData:
    """Lookup tables for list types and locations."""

    def __init__(
        self,
        list_types: Iterable[ListTypeConfig],
        locations: Iterable[LocationRecord],
    ) -> None:
        """Index the given records by id and, for list types, by name."""
        self._list_types_by_id = {lt.id: lt for lt in list_types}
        self._list_types_by_name = {
            lt.name: lt for lt in self._list_types_by_id.values()
        }
        self._locations_by_id = {loc.location_id: loc for loc in locations}

    @classmethod
    def from_database(cls) -> "ReferenceData":
        """Load a snapshot from the list type, search config and location tables."""
        search_configs = {
            config.list_type_id: config for config in ListSearchConfig.objects.all()
        }
        list_types = []
        for list_type in ListType.objects.all():
            config = search_configs.get(list_type.id)
            list_types.append(
                ListTypeConfig(
                    id=list_type.id,
                    name=list_type.name,
                    friendly_name=list_type.friendly_name,
                    welsh_friendly_name=list_type.welsh_friendly_name,
                    case_number_field_name=(
                        config.case_number_field_name or None if config else None
                    ),
                    case_name_field_name=(
                        config.case_name_field_name or None if config else None
                    ),
                )
            )
        locations = [
            LocationRecord(
                location_id=location.location_id,
                name=location.name,
                welsh_name=location.welsh_name,
            )
            for location in Location.objects.all()
        ]
        return cls(list_types=list_types, locations=locations)

    @property
    def list_type_names(self) -> list[str]:
        """Names of every known list type, in id order."""
        return [
            self._list_types_by_id[key].name for key in sorted(self._list_types_by_id)
        ]

    def get_list_type(self, list_type_id: int) -> ListTypeConfig | None:
        """Look up a list type by id."""
        return self._list_types_by_id.get(list_type_id)

    def get_list_type_by_name(self, name: str) -> ListTypeConfig | None:
        """Look up a list type by its upper snake case name."""
        return self._list_types_by_name.get(name)

    def get_location(self, location_id: int | str) -> LocationRecord | None:
        """Look up a location, accepting the string ids used on artefacts."""
        parsed = parse_court_id(location_id)
        if parsed is None:
            return None
        return self._locations_by_id.get(parsed)
