"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from missive import __version__
from missive.api.dependencies import get_settings
from missive.api.exceptions import CRUD_ERROR_STATUS, MissiveAPIError
from missive.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from missive.api.routes import register_routes
from missive.observability.logging import get_logger, setup_logging
from missive.observability.middleware import LoggingContextMiddleware
from missive.records.errors import CrudOperationError

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a fully configured FastAPI app with:
    - Structured logging
    - CORS middleware
    - Request logging context middleware
    - Global exception handlers
    - All API routes registered
    """
    settings = get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_secrets=log_config.redact_secrets,
    )

    app = FastAPI(
        title="Missive API",
        description="Single-record-per-identity message store with audit history",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingContextMiddleware)

    register_exception_handlers(app)
    register_routes(app, settings)

    logger.info(
        "app_created",
        debug=settings.debug,
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error_response(status_code: int, body: ErrorBody) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(mode="json", exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(CrudOperationError)
    async def crud_error_handler(
        request: Request, exc: CrudOperationError
    ) -> JSONResponse:
        """Map engine failures to their HTTP status and error code."""
        status_code, message = CRUD_ERROR_STATUS[exc.error]
        logger.info(
            "crud_error",
            error_code=exc.error.value,
            path=request.url.path,
        )
        return _error_response(
            status_code,
            ErrorBody(code=ErrorCode(exc.error.value), message=message),
        )

    @app.exception_handler(MissiveAPIError)
    async def missive_api_error_handler(
        request: Request, exc: MissiveAPIError
    ) -> JSONResponse:
        """Handle MissiveAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(
            exc.status_code,
            ErrorBody(code=exc.error_code, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors."""
        logger.warning(
            "validation_error",
            errors=len(exc.errors()),
            path=request.url.path,
        )

        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error["loc"]),
                message=error["msg"],
            )
            for error in exc.errors()
        ]

        return _error_response(
            400,
            ErrorBody(
                code=ErrorCode.INVALID_REQUEST,
                message="Request validation failed",
                details=details,
            ),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error_response(
            500,
            ErrorBody(
                code=ErrorCode.INTERNAL_ERROR,
                message="An unexpected error occurred",
            ),
        )

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
