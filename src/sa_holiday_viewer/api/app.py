"""
sa_holiday_viewer.api.app

FastAPI app factory for the SA holiday viewer service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine, collaborator HTTP client,
  viewer registry).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from sa_holiday_viewer.api.routers.health import router as health_router
from sa_holiday_viewer.api.routers.identity import router as identity_router
from sa_holiday_viewer.api.routers.internal.router import router as internal_router
from sa_holiday_viewer.api.routers.viewers import router as viewers_router
from sa_holiday_viewer.collaborators.internal_http import InternalApiClient
from sa_holiday_viewer.db.init_db import init_db
from sa_holiday_viewer.db.session import create_engine, create_sessionmaker
from sa_holiday_viewer.observability.logging import configure_logging, get_logger
from sa_holiday_viewer.observability.middleware import RequestContextMiddleware
from sa_holiday_viewer.services.viewer_registry import ViewerRegistry
from sa_holiday_viewer.settings import Settings, get_settings

log = get_logger(__name__)


def build_collaborator_http(app: FastAPI, settings: Settings) -> httpx.AsyncClient:
    timeout = httpx.Timeout(settings.collaborator_timeout_seconds)
    if settings.collaborator_base_url:
        return httpx.AsyncClient(base_url=settings.collaborator_base_url, timeout=timeout)
    # In-process calls to the emulated /internal/v1 systems (no real network).
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://collaborators.internal",
        timeout=timeout,
    )


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            await init_db(engine)

        http = build_collaborator_http(app, settings)
        app.state.http = http
        app.state.viewers = ViewerRegistry(
            backend=InternalApiClient(settings=settings, http=http),
            max_viewers=settings.max_viewers,
        )
        try:
            yield
        finally:
            # Disposing viewers first makes any in-flight search drop its result.
            app.state.viewers.dispose_all()
            await http.aclose()
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="SA ID Holiday Viewer",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Routers resolve settings through get_settings; pin it to this app's instance.
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(identity_router)
    app.include_router(viewers_router)
    app.include_router(internal_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; search logic lives in the viewer/orchestrator layers.
