"""Health check schemas."""

from core.schemas.health.health_check import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

__all__ = ["DependencyHealth", "LivenessResponse", "ReadinessResponse"]
