"""Subscription search types."""

from enum import Enum


class SearchType(str, Enum):
    """What a location/case subscription matches on."""

    LOCATION_ID = "LOCATION_ID"
    CASE_NUMBER = "CASE_NUMBER"
    CASE_NAME = "CASE_NAME"
