"""Services for the core app."""

from core.services.health_service import HealthService, health_service

# Pipeline services import models and are imported from their modules
# directly to keep app loading free of model imports.

__all__ = [
    "HealthService",
    "health_service",
]
