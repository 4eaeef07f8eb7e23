"""API route registration."""

from fastapi import APIRouter, FastAPI

from missive.config.settings import Settings
from missive.observability.logging import get_logger

logger = get_logger(__name__)


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all routes."""
    router = APIRouter(prefix="/v1")

    from missive.api.routes.history import router as history_router
    from missive.api.routes.messages import router as messages_router

    router.include_router(messages_router, tags=["Messages"])
    router.include_router(history_router, tags=["History"])

    logger.debug("v1_router_created", routes=["messages", "history"])

    return router


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application."""
    app.include_router(create_v1_router())

    from missive.api.routes.health import get_metrics
    from missive.api.routes.health import router as health_router

    app.include_router(health_router, tags=["Health"])

    if settings.observability.metrics.enabled:
        app.add_api_route(
            settings.observability.metrics.path,
            get_metrics,
            methods=["GET"],
            tags=["Health"],
        )

    logger.info("routes_registered")
