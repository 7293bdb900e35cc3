"""Green Ledger API - Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from greenledger_api import __version__
from greenledger_api.errors import PersistenceError
from greenledger_api.log_config import configure_logging
from greenledger_api.middleware.request_log import RequestLogMiddleware
from greenledger_api.routes import activities, companies, dashboard, reports
from greenledger_api.settings import Settings, get_settings
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[JSONCollectionStore] = None,
) -> FastAPI:
    """Build the API around a collection store (default: one at settings.data_dir)."""
    settings = settings or get_settings()
    store = store or JSONCollectionStore(settings.data_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info("Green Ledger server starting up...")
        app.state.store.initialize()
        logger.info(f"Green Ledger ready (environment={settings.environment}, data_dir={store.data_dir})")
        yield
        logger.info("Shutting down Green Ledger...")

    app = FastAPI(
        title="Green Ledger API",
        description="Hash-chained ESG activity ledger and compliance reporting",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLogMiddleware)

    # Prometheus metrics
    app.mount("/metrics", make_asgi_app())

    # Register routers
    app.include_router(companies.router)
    app.include_router(activities.router)
    app.include_router(reports.router)
    app.include_router(dashboard.router)

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        """Fail the current request when a collection cannot be written."""
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        content = {"detail": f"Failed to persist {exc.collection}"}
        if settings.is_development:
            content["message"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Report validation failures without echoing rejected values, which may not be valid JSON."""
        errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(errors)},
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint (basic liveness)."""
        return {
            "status": "healthy",
            "service": "greenledger-api",
            "version": __version__,
        }

    @app.get("/ready")
    async def readiness_check(store: JSONCollectionStore = Depends(get_store)):
        """Readiness check endpoint (verifies the data directory is writable)."""
        ready = store.is_writable()
        return JSONResponse(
            content={
                "status": "ready" if ready else "not_ready",
                "checks": {"data_dir": ready},
            },
            status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "Green Ledger API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


configure_logging(get_settings())
app = create_app()
