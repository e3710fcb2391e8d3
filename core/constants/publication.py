"""Limits and fixed messages for the publication pipeline."""

MAX_BLOB_SIZE_BYTES = 10 * 1024 * 1024
MAX_PDF_SIZE_BYTES = 2 * 1024 * 1024

MAX_SUBSCRIPTIONS_PER_USER = 50
MAX_LIST_TYPE_SUBSCRIPTIONS_PER_USER = 50

MAX_SEARCH_FIELD_NAME_LENGTH = 100

CIVIL_AND_FAMILY_DAILY_CAUSE_LIST = "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST"

SKIPPED_NO_EMAIL_MESSAGE = "No email address"

PDDA_HTML_ARTEFACT_TYPE = "LCSU"
PDDA_HTML_ALLOWED_EXTENSIONS = (".htm", ".html")
PDDA_HTML_KEY_PREFIX = "pdda-html"

# Ingestion responses
INGESTION_SUCCESS_MESSAGE = "Blob ingested and published successfully"
INGESTION_NO_MATCH_MESSAGE = "Blob ingested but location not found in reference data"
INGESTION_VALIDATION_FAILED_MESSAGE = "Validation failed"
INGESTION_SYSTEM_ERROR_MESSAGE = "Internal server error during ingestion"
