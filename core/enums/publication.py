"""Publication metadata enumerations.

Values match the strings stored in the artefact and ingestion log tables and
accepted on the blob ingestion endpoint.
"""

from enum import Enum


class Provenance(str, Enum):
    """Source system a publication was received from."""

    XHIBIT = "XHIBIT"
    MANUAL_UPLOAD = "MANUAL_UPLOAD"
    SNL = "SNL"
    COMMON_PLATFORM = "COMMON_PLATFORM"


class Sensitivity(str, Enum):
    """Access classification of a publication.

    CLASSIFIED is the most restrictive value and the default when a
    submission does not state one.
    """

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    CLASSIFIED = "CLASSIFIED"


class Language(str, Enum):
    """Language a publication is written in."""

    ENGLISH = "ENGLISH"
    WELSH = "WELSH"
    BILINGUAL = "BILINGUAL"


class IngestionStatus(str, Enum):
    """Outcome recorded for one ingestion attempt."""

    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    SYSTEM_ERROR = "SYSTEM_ERROR"
