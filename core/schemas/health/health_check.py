"""Liveness and readiness payloads."""

from pydantic import Field

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Result of probing one backing service."""

    healthy: bool
    status: HealthStatus
    message: str
    response_time_ms: float | None = Field(None, description="Probe duration")


class LivenessResponse(BaseSchemaModel):
    status: str = "alive"


class ReadinessResponse(BaseSchemaModel):
    """Readiness is reported as ``ready`` or ``degraded``; the service keeps
    accepting requests while a dependency is down."""

    ready: bool
    status: str
    degraded: bool
    dependencies: dict[str, DependencyHealth]
