"""Readiness probes for the database, Redis and temporary storage."""

import time
import uuid
from collections.abc import Callable
from pathlib import Path

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError

import structlog

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


class HealthService:
    """Probes backing services, caching each result for a few seconds."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cached: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Probe every dependency.

        A failing dependency marks the service degraded but still ready, so
        that an outage of Redis or the database does not take pods out of
        rotation while they reconnect.
        """
        dependencies = {
            "database": self._cached_probe("database", self._probe_database),
            "redis": self._cached_probe("redis", self._probe_redis),
            "storage": self._cached_probe("storage", self._probe_storage),
        }
        degraded = not all(d.healthy for d in dependencies.values())
        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            dependencies=dependencies,
        )

    def _cached_probe(
        self, name: str, probe: Callable[[], str]
    ) -> DependencyHealth:
        now = time.time()
        cached = self._cached.get(name)
        if cached is not None and now - cached[0] < self.cache_ttl_seconds:
            return cached[1]

        start = time.perf_counter()
        try:
            message = probe()
            health = DependencyHealth(
                healthy=True, status=HealthStatus.HEALTHY, message=message
            )
        except OperationalError as e:
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"{name} unavailable: {e!s}",
            )
        except Exception as e:
            health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"{name} check failed: {e!s}",
            )
        health.response_time_ms = (time.perf_counter() - start) * 1000

        if not health.healthy:
            logger.warning(
                "dependency_unhealthy", dependency=name, detail=health.message
            )
        self._cached[name] = (now, health)
        return health

    @staticmethod
    def _probe_database() -> str:
        connection.ensure_connection()
        return "Database connection successful"

    @staticmethod
    def _probe_redis() -> str:
        key = "__health_check__"
        cache.set(key, "ok", timeout=1)
        if cache.get(key) != "ok":
            raise OperationalError("unexpected result from cache round trip")
        return "Redis connection successful"

    @staticmethod
    def _probe_storage() -> str:
        root = Path(settings.TEMP_STORAGE_ROOT)
        root.mkdir(parents=True, exist_ok=True)
        probe = root / f".health-{uuid.uuid4()}"
        probe.write_bytes(b"ok")
        probe.unlink()
        return "Temporary storage writable"


health_service = HealthService()
