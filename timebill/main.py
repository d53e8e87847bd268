# timebill/main.py (async version)

import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.openapi.utils import get_openapi
from contextlib import asynccontextmanager
from starlette.exceptions import HTTPException as StarletteHTTPException

from timebill import __version__
from timebill.adapters.configuration.config import Settings, settings as default_settings
from timebill.adapters.inbound.api.v1.router import api_router
from timebill.adapters.outbound.persistence.storage_provider import build_storage_provider
from timebill.application.ports.outbound import IStorageProvider
from timebill.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    http_exception_handler,
    validation_exception_handler,
)

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if default_settings.DEBUG else getattr(logging, default_settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    """
    logger.info("Application starting up...")
    await app.state.storage_provider.startup()

    yield

    logger.info("Application shutting down...")
    await app.state.storage_provider.shutdown()


def create_app(
        settings: Optional[Settings] = None,
        storage_provider: Optional[IStorageProvider] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; the environment-loaded settings by default
        storage_provider: Persistence backend; built from ``settings`` when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Timebill",
        description="Consultancy time tracking and billing API",
        version=__version__,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.SCHEMA_VISIBILITY else None,
        redoc_url="/redoc" if settings.SCHEMA_VISIBILITY else None,
        openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
    )
    app.state.settings = settings
    app.state.storage_provider = storage_provider or build_storage_provider(settings)

    # Middlewares: the last one added is the outermost
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Routers
    app.include_router(api_router)

    if settings.SCHEMA_VISIBILITY:
        @app.get("/", include_in_schema=False)
        async def redirect_to_docs():
            return RedirectResponse(url="/docs")

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Validation errors are answered with 400, not 422
        for name in ("HTTPValidationError", "ValidationError"):
            schema.get("components", {}).get("schemas", {}).pop(name, None)

        for path in schema.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi

    logger.info(f"Application created (environment: {settings.ENVIRONMENT})")
    return app


app = create_app()
