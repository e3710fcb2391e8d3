"""Unit tests for the blob submission validator."""

import unittest
from unittest.mock import Mock

from core.schemas.publication.validation_result import FieldError
from core.services.publication_validator import (
    REQUIRED_FIELDS,
    PublicationValidator,
    parse_court_id,
    parse_iso_date,
    parse_iso_datetime,
)
from core.services.reference_data import ListTypeConfig
from tests.factories import (
    blob_submission,
    build_reference_data,
    civil_and_family_list_type,
)


def _messages(result, field):
    return [e.message for e in result.errors if e.field == field]


class TestPublicationValidator(unittest.TestCase):
    """Tests for PublicationValidator.validate."""

    def setUp(self):
        """Set up test fixtures."""
        self.validator = PublicationValidator(build_reference_data())

    def test_valid_submission_passes(self):
        """Test that a complete submission for a known court is valid."""
        result = self.validator.validate(blob_submission(), 2048)

        self.assertTrue(result.is_valid)
        self.assertEqual(result.errors, [])
        self.assertTrue(result.location_exists)
        self.assertEqual(result.list_type_id, 8)

    def test_unknown_court_is_valid_but_not_matched(self):
        """Test that an unknown court id is accepted and flagged."""
        result = self.validator.validate(blob_submission(court_id="1234"), 2048)

        self.assertTrue(result.is_valid)
        self.assertFalse(result.location_exists)

    def test_empty_submission_reports_every_required_field(self):
        """Test that all missing fields are reported together."""
        result = self.validator.validate({}, 2)

        self.assertFalse(result.is_valid)
        self.assertEqual(
            [e.field for e in result.errors], list(REQUIRED_FIELDS)
        )
        self.assertEqual(_messages(result, "court_id"), ["court_id is required"])
        self.assertIsNone(result.list_type_id)

    def test_non_object_body_is_treated_as_empty(self):
        """Test that a JSON array body reports missing fields."""
        result = self.validator.validate(["not", "an", "object"], 20)

        self.assertEqual(len(result.errors), len(REQUIRED_FIELDS))

    def test_empty_string_counts_as_missing(self):
        """Test that blank values are reported as required."""
        result = self.validator.validate(blob_submission(language=""), 2048)

        self.assertEqual(_messages(result, "language"), ["language is required"])

    def test_oversized_body_is_rejected(self):
        """Test that the size cap is enforced alongside other rules."""
        result = self.validator.validate(
            blob_submission(provenance="FAX"), 10 * 1024 * 1024 + 1
        )

        self.assertEqual(
            _messages(result, "body"), ["Payload too large. Maximum size is 10MB"]
        )
        self.assertEqual(len(_messages(result, "provenance")), 1)

    def test_body_at_exactly_the_cap_is_accepted(self):
        """Test that the size limit is inclusive."""
        result = self.validator.validate(blob_submission(), 10 * 1024 * 1024)

        self.assertTrue(result.is_valid)

    def test_invalid_enum_values(self):
        """Test messages for provenance, sensitivity and language."""
        result = self.validator.validate(
            blob_submission(provenance="FAX", sensitivity="SECRET", language="FR"),
            2048,
        )

        self.assertEqual(
            _messages(result, "provenance"),
            [
                "Invalid provenance. Allowed values: "
                "XHIBIT, MANUAL_UPLOAD, SNL, COMMON_PLATFORM"
            ],
        )
        self.assertEqual(
            _messages(result, "sensitivity"),
            ["Invalid sensitivity. Allowed values: PUBLIC, PRIVATE, CLASSIFIED"],
        )
        self.assertEqual(
            _messages(result, "language"),
            ["Invalid language. Allowed values: ENGLISH, WELSH, BILINGUAL"],
        )

    def test_enum_values_are_case_sensitive(self):
        """Test that lower case provenance is rejected."""
        result = self.validator.validate(
            blob_submission(provenance="manual_upload"), 2048
        )

        self.assertEqual(len(_messages(result, "provenance")), 1)

    def test_unknown_list_type_lists_allowed_names(self):
        """Test that the list type error names every known list type."""
        result = self.validator.validate(blob_submission(list_type="NOPE"), 2048)

        self.assertEqual(
            _messages(result, "list_type"),
            [
                "Invalid list type. Allowed values: "
                "CIVIL_AND_FAMILY_DAILY_CAUSE_LIST, "
                "CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST"
            ],
        )
        self.assertIsNone(result.list_type_id)

    def test_invalid_content_date(self):
        """Test that non ISO content dates are rejected."""
        result = self.validator.validate(
            blob_submission(content_date="07/03/2025"), 2048
        )

        self.assertEqual(
            _messages(result, "content_date"),
            ["content_date must be a valid ISO 8601 date"],
        )

    def test_content_date_may_carry_a_time(self):
        """Test that a full timestamp is accepted as a content date."""
        result = self.validator.validate(
            blob_submission(content_date="2025-03-07T00:00:00Z"), 2048
        )

        self.assertTrue(result.is_valid)

    def test_display_window_requires_datetimes(self):
        """Test that a bare date is not a valid display datetime."""
        result = self.validator.validate(
            blob_submission(display_from="2025-03-07", display_to="tomorrow"), 2048
        )

        self.assertEqual(
            _messages(result, "display_from"),
            ["display_from must be a valid ISO 8601 datetime"],
        )
        self.assertEqual(
            _messages(result, "display_to"),
            ["display_to must be a valid ISO 8601 datetime"],
        )

    def test_display_to_before_display_from(self):
        """Test the ordering rule of the display window."""
        result = self.validator.validate(
            blob_submission(
                display_from="2025-03-08T00:00:00Z",
                display_to="2025-03-07T00:00:00Z",
            ),
            2048,
        )

        self.assertEqual(
            _messages(result, "display_to"),
            ["display_to must be after display_from"],
        )

    def test_equal_display_bounds_are_allowed(self):
        """Test that a zero length display window is valid."""
        result = self.validator.validate(
            blob_submission(
                display_from="2025-03-07T00:00:00Z",
                display_to="2025-03-07T00:00:00Z",
            ),
            2048,
        )

        self.assertTrue(result.is_valid)

    def test_non_numeric_court_id(self):
        """Test that a court id without a leading number is rejected."""
        result = self.validator.validate(blob_submission(court_id="abc"), 2048)

        self.assertEqual(
            _messages(result, "court_id"), ["court_id must be a valid number"]
        )
        self.assertFalse(result.location_exists)

    def test_court_id_with_trailing_text_uses_leading_number(self):
        """Test that the leading integer of a court id is looked up."""
        result = self.validator.validate(blob_submission(court_id="9001A"), 2048)

        self.assertTrue(result.is_valid)
        self.assertTrue(result.location_exists)

    def test_schema_errors_are_prefixed_with_json_path(self):
        """Test that nested schema violations carry their path."""
        submission = blob_submission()
        submission["hearing_list"]["courtLists"] = []

        result = self.validator.validate(submission, 2048)

        messages = _messages(result, "hearing_list")
        self.assertEqual(len(messages), 1)
        self.assertTrue(messages[0].startswith("$.courtLists: "))

    def test_root_schema_errors_have_no_path(self):
        """Test that violations at the document root are not prefixed."""
        submission = blob_submission()
        del submission["hearing_list"]["venue"]

        result = self.validator.validate(submission, 2048)

        self.assertEqual(
            _messages(result, "hearing_list"), ["'venue' is a required property"]
        )

    def test_schema_is_skipped_when_other_fields_fail(self):
        """Test that the schema check only runs on otherwise valid input."""
        submission = blob_submission(language="FR")
        submission["hearing_list"] = {"not": "a cause list"}

        result = self.validator.validate(submission, 2048)

        self.assertEqual(_messages(result, "hearing_list"), [])

    def test_array_payload_for_care_standards_list(self):
        """Test a valid array payload and a bad date inside it."""
        hearing = {
            "date": "07/03/2025",
            "caseName": "A Care Home Ltd v Ofsted",
            "hearingLength": "1 day",
            "hearingType": "Final",
            "venue": "Remote",
            "additionalInformation": "",
        }
        valid = self.validator.validate(
            blob_submission(
                list_type="CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST",
                hearing_list=[hearing],
            ),
            1024,
        )
        invalid = self.validator.validate(
            blob_submission(
                list_type="CARE_STANDARDS_TRIBUNAL_WEEKLY_HEARING_LIST",
                hearing_list=[{**hearing, "date": "2025-03-07"}],
            ),
            1024,
        )

        self.assertTrue(valid.is_valid)
        self.assertEqual(valid.list_type_id, 9)
        self.assertTrue(_messages(invalid, "hearing_list")[0].startswith("$[0].date: "))

    def test_list_type_without_schema(self):
        """Test that a known list type with no schema file is rejected."""
        validator = PublicationValidator(
            build_reference_data(
                list_types=[
                    ListTypeConfig(
                        id=1,
                        name="CIVIL_DAILY_CAUSE_LIST",
                        friendly_name="Civil Daily Cause List",
                    )
                ]
            )
        )

        result = validator.validate(
            blob_submission(list_type="CIVIL_DAILY_CAUSE_LIST"), 2048
        )

        self.assertEqual(
            _messages(result, "hearing_list"),
            ["No JSON schema available for list type CIVIL_DAILY_CAUSE_LIST"],
        )

    def test_schema_validator_failure_becomes_field_error(self):
        """Test that an exception while validating is reported, not raised."""
        schema_validator = Mock()
        schema_validator.validate.side_effect = RuntimeError("broken schema")
        validator = PublicationValidator(
            build_reference_data([civil_and_family_list_type()]),
            schema_validator=schema_validator,
        )

        result = validator.validate(blob_submission(), 2048)

        self.assertEqual(
            result.errors,
            [
                FieldError(
                    field="hearing_list",
                    message="Failed to validate hearing_list against schema",
                )
            ],
        )

    def test_joined_errors(self):
        """Test the ingestion log rendering of errors."""
        result = self.validator.validate({"court_id": "1"}, 10)

        self.assertTrue(
            result.joined_errors().startswith(
                "provenance: provenance is required; content_date: "
            )
        )


class TestParsers(unittest.TestCase):
    """Tests for the parsing helpers."""

    def test_parse_iso_date(self):
        """Test date parsing with and without a time part."""
        self.assertEqual(str(parse_iso_date("2025-03-07")), "2025-03-07")
        self.assertEqual(str(parse_iso_date("2025-03-07T23:00:00Z")), "2025-03-07")
        self.assertIsNone(parse_iso_date("2025-13-07"))
        self.assertIsNone(parse_iso_date(20250307))

    def test_parse_iso_datetime_defaults_to_utc(self):
        """Test that naive datetimes are read as UTC."""
        parsed = parse_iso_datetime("2025-03-07T10:00:00")

        self.assertEqual(parsed.utcoffset().total_seconds(), 0)

    def test_parse_court_id(self):
        """Test the court id forms submitters use."""
        self.assertEqual(parse_court_id(123), 123)
        self.assertEqual(parse_court_id(" 0042 "), 42)
        self.assertIsNone(parse_court_id(True))
        self.assertIsNone(parse_court_id("court"))


if __name__ == "__main__":
    unittest.main()
