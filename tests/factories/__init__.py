"""Test data builders for models, reference data and list payloads.

Values that do not matter to a test come from Faker; anything a test asserts
on is passed in explicitly.
"""

from datetime import UTC, date, datetime, timedelta

from faker import Faker

from core.enums import Language, SearchType
from core.models import (
    Artefact,
    ListSearchConfig,
    ListType,
    Location,
    Subscription,
    User,
)
from core.services.reference_data import ListTypeConfig, LocationRecord, ReferenceData

fake = Faker("en_GB")

CIVIL_AND_FAMILY_ID = 8
CARE_STANDARDS_ID = 9


def civil_and_family_list_type(**overrides) -> ListTypeConfig:
    values = {
        "id": CIVIL_AND_FAMILY_ID,
        "name": "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST",
        "friendly_name": "Civil and Family Daily Cause List",
        "case_number_field_name": "caseNumber",
        "case_name_field_name": "caseName",
    }
    values.update(overrides)
    return ListTypeConfig(**values)


def care_standards_list_type(**overrides) -> ListTypeConfig:
    values = {
        "id": CARE_STANDARDS_ID,
        "name": "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST",
        "friendly_name": "Care Standards Tribunal Weekly Hearing List",
        "case_name_field_name": "caseName",
    }
    values.update(overrides)
    return ListTypeConfig(**values)


def build_reference_data(list_types=None, locations=None) -> ReferenceData:
    """Reference data with both shipped list types and location 9001."""
    if list_types is None:
        list_types = [civil_and_family_list_type(), care_standards_list_type()]
    if locations is None:
        locations = [
            LocationRecord(
                location_id=9001,
                name="Oxford Combined Court Centre",
                welsh_name="Canolfan Llysoedd Cyfun Rhydychen",
            )
        ]
    return ReferenceData(list_types=list_types, locations=locations)


def create_user(email: str | None = "", **fields) -> User:
    """Create a user; pass ``email=None`` for one without an address."""
    return User.objects.create(
        email=fake.unique.email() if email == "" else email,
        first_name=fields.pop("first_name", fake.first_name()),
        surname=fields.pop("surname", fake.last_name()),
        **fields,
    )


def create_location(location_id: int = 9001, **fields) -> Location:
    fields.setdefault("name", f"{fake.city()} Combined Court Centre")
    fields.setdefault("welsh_name", "")
    return Location.objects.create(location_id=location_id, **fields)


def create_list_type(
    list_type_id: int = CIVIL_AND_FAMILY_ID,
    name: str = "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST",
    friendly_name: str = "Civil and Family Daily Cause List",
    case_number_field_name: str | None = "caseNumber",
    case_name_field_name: str | None = "caseName",
) -> ListType:
    """Create a list type and, when field names are given, its search config."""
    list_type = ListType.objects.create(
        id=list_type_id, name=name, friendly_name=friendly_name
    )
    if case_number_field_name or case_name_field_name:
        ListSearchConfig.objects.create(
            list_type=list_type,
            case_number_field_name=case_number_field_name or "",
            case_name_field_name=case_name_field_name or "",
        )
    return list_type


def create_subscription(
    user: User,
    search_type: SearchType = SearchType.LOCATION_ID,
    search_value: str = "9001",
    **fields,
) -> Subscription:
    return Subscription.objects.create(
        user=user,
        search_type=search_type.value,
        search_value=search_value,
        **fields,
    )


def create_artefact(**fields) -> Artefact:
    now = datetime.now(UTC)
    values = {
        "location_id": "9001",
        "list_type_id": CIVIL_AND_FAMILY_ID,
        "provenance": "MANUAL_UPLOAD",
        "sensitivity": "PUBLIC",
        "language": Language.ENGLISH.value,
        "content_date": date(2025, 3, 7),
        "display_from": now,
        "display_to": now + timedelta(days=1),
    }
    values.update(fields)
    return Artefact.objects.create(**values)


def civil_and_family_case(**overrides) -> dict:
    case = {
        "caseNumber": f"AB-{fake.random_number(digits=6, fix_len=True)}",
        "caseName": f"{fake.last_name()} v {fake.last_name()}",
        "caseType": "Civil",
        "party": [
            {
                "partyRole": "APPLICANT_PETITIONER",
                "individualDetails": {
                    "individualForenames": fake.first_name(),
                    "individualSurname": fake.last_name(),
                },
            },
            {
                "partyRole": "RESPONDENT",
                "organisationDetails": {"organisationName": fake.company()},
            },
        ],
    }
    case.update(overrides)
    return case


def civil_and_family_payload(cases=None, **overrides) -> dict:
    """A schema-valid civil and family daily cause list."""
    if cases is None:
        cases = [civil_and_family_case()]
    payload = {
        "document": {"publicationDate": "2025-03-06T09:30:00Z"},
        "venue": {
            "venueName": "Oxford Combined Court Centre",
            "venueAddress": {
                "line": ["St Aldates"],
                "town": "Oxford",
                "postCode": "OX1 1TL",
            },
        },
        "courtLists": [
            {
                "courtHouse": {
                    "courtHouseName": "Oxford Combined Court Centre",
                    "courtRoom": [
                        {
                            "courtRoomName": "Courtroom 1",
                            "session": [
                                {
                                    "judiciary": [
                                        {
                                            "johKnownAs": "District Judge Wren",
                                            "isPresiding": True,
                                        }
                                    ],
                                    "sittings": [
                                        {
                                            "sittingStart": "2025-03-07T10:00:00Z",
                                            "sittingEnd": "2025-03-07T11:30:00Z",
                                            "channel": ["In person"],
                                            "hearing": [
                                                {
                                                    "hearingType": "Directions",
                                                    "case": cases,
                                                }
                                            ],
                                        }
                                    ],
                                }
                            ],
                        }
                    ],
                }
            }
        ],
    }
    payload.update(overrides)
    return payload


def blob_submission(**overrides) -> dict:
    """A valid blob ingestion request body for location 9001."""
    submission = {
        "court_id": "9001",
        "provenance": "MANUAL_UPLOAD",
        "content_date": "2025-03-07",
        "list_type": "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST",
        "sensitivity": "PUBLIC",
        "language": "ENGLISH",
        "display_from": "2025-03-07T00:00:00Z",
        "display_to": "2025-03-08T00:00:00Z",
        "hearing_list": civil_and_family_payload(),
    }
    submission.update(overrides)
    return submission
