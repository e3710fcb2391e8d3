"""Unit tests for the management commands."""

from io import StringIO

from django.core.management import call_command
from django.test import SimpleTestCase, TestCase

from core.management.commands.runlocal import Command as RunLocalCommand
from core.management.commands.seed_reference_data import LIST_TYPES, LOCATIONS
from core.models import ListSearchConfig, ListType, Location


class TestSeedReferenceData(TestCase):
    """Tests for seed_reference_data."""

    def _seed(self):
        out = StringIO()
        call_command("seed_reference_data", stdout=out)
        return out.getvalue()

    def test_seeds_list_types_and_locations(self):
        """Test the reference rows and the summary line."""
        output = self._seed()

        self.assertIn("Seeded 9 list types and 10 locations", output)
        self.assertEqual(ListType.objects.count(), len(LIST_TYPES))
        self.assertEqual(Location.objects.count(), len(LOCATIONS))
        self.assertEqual(
            ListType.objects.get(id=8).url, "civil-and-family-daily-cause-list"
        )

    def test_search_configuration(self):
        """Test the seeded case number and case name fields."""
        self._seed()

        civil = ListSearchConfig.objects.get(list_type_id=8)
        care = ListSearchConfig.objects.get(list_type_id=9)

        self.assertEqual(civil.case_number_field_name, "caseNumber")
        self.assertEqual(civil.case_name_field_name, "caseName")
        self.assertEqual(care.case_number_field_name, "")

    def test_idempotent(self):
        """Test that running twice updates rather than duplicates."""
        Location.objects.create(location_id=1, name="Old name", welsh_name="Hen enw")

        self._seed()
        self._seed()

        self.assertEqual(Location.objects.count(), len(LOCATIONS))
        self.assertEqual(ListSearchConfig.objects.count(), 2)
        self.assertEqual(
            Location.objects.get(location_id=1).name, "Oxford Combined Court Centre"
        )


class TestRunLocalCommand(SimpleTestCase):
    """Tests for the runlocal development server command."""

    def test_skips_migration_check(self):
        """Test that startup does not inspect migrations."""
        out = StringIO()
        command = RunLocalCommand(stdout=out)

        command.check_migrations()

        self.assertIn("Skipping migration checks", out.getvalue())
