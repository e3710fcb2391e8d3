"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "publication_service.settings_test")
django.setup()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def storage_root(tmp_path, settings):
    """Temporary storage root for payloads and rendered PDFs."""
    settings.TEMP_STORAGE_ROOT = tmp_path
    return tmp_path
