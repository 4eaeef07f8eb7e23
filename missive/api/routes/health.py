"""Health check and metrics endpoints."""

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from missive import __version__
from missive.api.dependencies import SettingsDep, get_cached_engine
from missive.api.models.health import ComponentHealth, HealthResponse
from missive.config.settings import Settings
from missive.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Check service health status.

    Never builds the engine. Before the first request the engine is
    reported from configuration alone: it is unhealthy when there is
    neither a snapshot to restore nor a creator to deploy.
    """
    logger.debug("health_check_request")

    component = _engine_health(settings)

    overall_status: Literal["healthy", "degraded", "unhealthy"] = component.status

    response = HealthResponse(
        status=overall_status,
        version=__version__,
        components=[component],
        timestamp=datetime.now(UTC),
    )

    logger.debug("health_check_completed", status=overall_status)

    return response


async def get_metrics() -> Response:
    """Get Prometheus metrics in text format for scraping."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def _engine_health(settings: Settings) -> ComponentHealth:
    engine = get_cached_engine()
    if engine is not None:
        return ComponentHealth(name="engine", status="healthy", message=f"owner={engine.owner}")

    snapshot_path = settings.storage.snapshot_path
    if snapshot_path is not None and snapshot_path.exists():
        return ComponentHealth(
            name="engine", status="healthy", message="not initialized, snapshot available"
        )
    if settings.engine.creator:
        return ComponentHealth(
            name="engine", status="healthy", message="not initialized, ready to deploy"
        )
    return ComponentHealth(
        name="engine",
        status="unhealthy",
        message="No engine snapshot found and engine.creator is not set",
    )
