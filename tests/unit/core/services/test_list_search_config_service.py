"""Unit tests for list type search configuration."""

from core.exceptions import ListTypeNotFoundError
from core.models import ListSearchConfig
from core.schemas.subscription import ListSearchConfigDetail, ListSearchConfigUpdate
from core.services.list_search_config_service import (
    ListSearchConfigService,
    validate_search_config,
)
from tests.base import BaseUnitTest
from tests.factories import create_list_type


class TestValidateSearchConfig(BaseUnitTest):
    """Tests for validate_search_config."""

    def _errors(self, **fields):
        return [
            (e.field, e.message)
            for e in validate_search_config(ListSearchConfigUpdate(**fields))
        ]

    def test_one_field_is_enough(self):
        """Test that a single field name is valid."""
        self.assertEqual(self._errors(case_name_field_name="caseName"), [])

    def test_both_blank(self):
        """Test that at least one name is required."""
        self.assertEqual(
            self._errors(case_number_field_name="  "),
            [("case_number_field_name", "Enter at least one field name")],
        )

    def test_invalid_characters(self):
        """Test the allowed character set."""
        self.assertEqual(
            self._errors(case_number_field_name="case.number"),
            [
                (
                    "case_number_field_name",
                    "Case number field name must contain only letters, "
                    "numbers and underscores",
                )
            ],
        )

    def test_too_long(self):
        """Test the length cap."""
        self.assertEqual(
            self._errors(case_name_field_name="a" * 101),
            [
                (
                    "case_name_field_name",
                    "Case name field name must be 100 characters or less",
                )
            ],
        )

    def test_camel_case_aliases(self):
        """Test that the request body may use camelCase keys."""
        update = ListSearchConfigUpdate.model_validate(
            {"caseNumberFieldName": "caseNumber"}
        )

        self.assertEqual(update.case_number_field_name, "caseNumber")


class TestListSearchConfigService(BaseUnitTest):
    """Tests for get_config and save_config."""

    def setUp(self):
        """Set up test fixtures."""
        super().setUp()
        self.service = ListSearchConfigService()
        create_list_type(3, "CRIME_DAILY_LIST", "Crime Daily List", None, None)

    def test_get_unconfigured_list_type(self):
        """Test that an unconfigured list type has blank names."""
        config = self.service.get_config(3)

        self.assertEqual(config, ListSearchConfigDetail(list_type_id=3))

    def test_unknown_list_type(self):
        """Test the not found error."""
        with self.assertRaises(ListTypeNotFoundError):
            self.service.get_config(99)

    def test_save_creates_then_updates(self):
        """Test the upsert."""
        self.service.save_config(
            3, ListSearchConfigUpdate(case_number_field_name="caseNumber")
        )
        saved = self.service.save_config(
            3,
            ListSearchConfigUpdate(
                case_number_field_name=" caseRef ", case_name_field_name="caseName"
            ),
        )

        self.assertEqual(saved.case_number_field_name, "caseRef")
        self.assertEqual(saved.case_name_field_name, "caseName")
        self.assertIsNotNone(saved.updated_at)
        self.assertEqual(ListSearchConfig.objects.filter(list_type_id=3).count(), 1)

    def test_save_returns_errors_without_writing(self):
        """Test that invalid updates are not stored."""
        result = self.service.save_config(3, ListSearchConfigUpdate())

        self.assertEqual(len(result), 1)
        self.assertFalse(ListSearchConfig.objects.exists())
