"""Load development list types, search configuration and locations."""

from django.core.management.base import BaseCommand
from django.db import transaction

from core.models import ListSearchConfig, ListType, Location

LIST_TYPES = [
    (1, "CIVIL_DAILY_CAUSE_LIST", "Civil Daily Cause List"),
    (2, "FAMILY_DAILY_CAUSE_LIST", "Family Daily Cause List"),
    (3, "CRIME_DAILY_LIST", "Crime Daily List"),
    (4, "MAGISTRATES_PUBLIC_LIST", "Magistrates Public List"),
    (5, "CROWN_WARNED_LIST", "Crown Warned List"),
    (6, "CROWN_DAILY_LIST", "Crown Daily List"),
    (7, "CROWN_FIRM_LIST", "Crown Firm List"),
    (8, "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST", "Civil and Family Daily Cause List"),
    (
        9,
        "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST",
        "Care Standards Tribunal Weekly Hearing List",
    ),
]

SEARCH_CONFIGS = {
    8: ("caseNumber", "caseName"),
    9: ("", "caseName"),
}

LOCATIONS = [
    (1, "Oxford Combined Court Centre", "Canolfan Llysoedd Cyfun Rhydychen"),
    (
        2,
        "Birmingham Civil and Family Justice Centre",
        "Canolfan Cyfiawnder Sifil a Theulu Birmingham",
    ),
    (3, "Manchester Civil Justice Centre", "Canolfan Cyfiawnder Sifil Manceinion"),
    (4, "Royal Courts of Justice", "Llysoedd Barn Brenhinol"),
    (
        5,
        "Cardiff Civil and Family Justice Centre",
        "Canolfan Cyfiawnder Sifil a Theulu Caerdydd",
    ),
    (6, "Leeds Combined Court Centre", "Canolfan Llysoedd Cyfun Leeds"),
    (
        7,
        "Bristol Civil and Family Justice Centre",
        "Canolfan Cyfiawnder Sifil a Theulu Bryste",
    ),
    (8, "Liverpool Civil and Family Court", "Llys Sifil a Theulu Lerpwl"),
    (9, "Single Justice Procedure", "Gweithdrefn Un Ynad"),
    (10, "Newcastle Combined Court Centre", "Canolfan Llysoedd Cyfun Newcastle"),
]


class Command(BaseCommand):
    help = "Upsert development reference data (list types, locations)"

    def handle(self, *args, **options):
        with transaction.atomic():
            for list_type_id, name, friendly_name in LIST_TYPES:
                list_type, _ = ListType.objects.update_or_create(
                    id=list_type_id,
                    defaults={
                        "name": name,
                        "friendly_name": friendly_name,
                        "welsh_friendly_name": friendly_name,
                        "shortened_friendly_name": friendly_name,
                        "url": name.lower().replace("_", "-"),
                    },
                )
                if list_type_id in SEARCH_CONFIGS:
                    number_field, name_field = SEARCH_CONFIGS[list_type_id]
                    ListSearchConfig.objects.update_or_create(
                        list_type=list_type,
                        defaults={
                            "case_number_field_name": number_field,
                            "case_name_field_name": name_field,
                        },
                    )
            for location_id, name, welsh_name in LOCATIONS:
                Location.objects.update_or_create(
                    location_id=location_id,
                    defaults={"name": name, "welsh_name": welsh_name},
                )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(LIST_TYPES)} list types and {len(LOCATIONS)} locations"
            )
        )
