"""Unit tests for run_local module."""

import sys
import unittest
from unittest.mock import patch

import run_local


class TestRunLocal(unittest.TestCase):
    """Tests for run_local script."""

    @patch("run_local.execute_from_command_line")
    def test_main_calls_runlocal(self, mock_execute):
        """Test that main() calls the runlocal command with passed arguments."""
        with patch.object(sys, "argv", ["run_local.py", "0.0.0.0:8080"]):
            run_local.main()

        mock_execute.assert_called_once_with(
            ["run_local.py", "runlocal", "0.0.0.0:8080"]
        )

    def test_module_has_correct_docstring(self):
        """Test that module has expected docstring."""
        self.assertIn("Django's development server", run_local.__doc__)


if __name__ == "__main__":
    unittest.main()
