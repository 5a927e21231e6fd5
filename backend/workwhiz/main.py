"""Work Whiz - Main Application.

Validation and transformation core of the Work Whiz job board, exposed over
HTTP, with password emails delivered by a background ARQ worker.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.endpoints import metrics as metrics_endpoint
from .api.v1.router import api_router
from .core.config import settings
from .core.constants import ApiEndpoints, ErrorMessages, HttpHeaders
from .core.exceptions import TransformationError, UnknownSchemaError
from .core.logging import get_logger, get_request_id, setup_logging
from .core.metrics import set_app_info
from .infrastructure.messaging import close_arq_pool
from .middleware import RequestIDMiddleware
from .schemas.api import HealthResponse

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "Application starting",
        extra={
            'environment': settings.ENVIRONMENT,
            'version': settings.APP_VERSION
        }
    )

    set_app_info(
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT
    )
    logger.debug("Prometheus metrics initialized")

    yield

    logger.info("Application shutting down")
    await close_arq_pool()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Input validation and data transformation for the Work Whiz job board",
    lifespan=lifespan,
    docs_url=ApiEndpoints.DOCS,
    redoc_url=ApiEndpoints.REDOC,
    openapi_url=ApiEndpoints.OPENAPI
)


async def unknown_schema_handler(request: Request, exc: UnknownSchemaError):
    logger.info("Unknown entity kind requested", extra={'entity_kind': exc.kind})
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": ErrorMessages.UNKNOWN_ENTITY_KIND.format(kind=exc.kind),
            "detail": str(exc),
            "request_id": get_request_id()
        }
    )


async def transformation_error_handler(request: Request, exc: TransformationError):
    # Data defect: the record does not satisfy its entity's contract
    logger.error(
        "Transformation defect",
        extra={'entity': exc.entity, 'field': exc.field, 'reason': exc.reason}
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": ErrorMessages.TRANSFORMATION_FAILED,
            "detail": str(exc),
            "request_id": get_request_id()
        }
    )


app.add_exception_handler(UnknownSchemaError, unknown_schema_handler)
app.add_exception_handler(TransformationError, transformation_error_handler)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        HttpHeaders.REQUEST_ID,
    ],
)

# Request ID middleware (outermost, so every log line carries the request_id)
app.add_middleware(RequestIDMiddleware)

# Include API routes
app.include_router(
    api_router,
    prefix=settings.API_V1_PREFIX
)

# Prometheus metrics endpoint
app.include_router(metrics_endpoint.router, tags=["Metrics"])


@app.get(ApiEndpoints.HEALTH, response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint for readiness/liveness probes."""
    return HealthResponse(
        status="healthy",
        application=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "workwhiz.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
