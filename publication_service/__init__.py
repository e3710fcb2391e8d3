"""Publication service Django project."""
