# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
TenantHub Application Entry Point.

Entry point: uvicorn tenant_hub.main:app --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from tenant_hub.api.documents import router as documents_router
from tenant_hub.api.errors import hub_error_handler, validation_error_handler
from tenant_hub.api.events import router as events_router
from tenant_hub.api.middleware import RequestContextMiddleware
from tenant_hub.api.observability import router as observability_router
from tenant_hub.api.users import router as users_router
from tenant_hub.api.ws import router as ws_router
from tenant_hub.core.config import HubSettings, get_settings
from tenant_hub.core.context import HubContext
from tenant_hub.core.errors import HubError
from tenant_hub.core.logging import setup_logging

logger = logging.getLogger("hub.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the hub context on startup; everything is in memory, so shutdown only logs."""
    settings: HubSettings = app.state.settings
    hub = HubContext.from_settings(settings)
    await hub.start()
    app.state.hub = hub
    logger.info(
        "[TenantHub] Ready — host=%s port=%d env=%s uploads=%s",
        settings.HOST, settings.PORT, settings.ENV, settings.UPLOADS_DIR,
    )
    yield
    logger.info("[TenantHub] Shutdown complete")


def create_app(settings: Optional[HubSettings] = None) -> FastAPI:
    """Create the TenantHub FastAPI app."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, json_format=settings.json_logs)

    app = FastAPI(
        title="TenantHub",
        description="Tenant-isolated event fan-out and document storage",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Middleware ───────────────────────────────────────────────
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error Handlers ──────────────────────────────────────────
    app.add_exception_handler(HubError, hub_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ── Routes ──────────────────────────────────────────────────
    app.include_router(events_router)
    app.include_router(users_router)
    app.include_router(documents_router)
    app.include_router(ws_router)
    app.include_router(observability_router)

    return app


app = create_app()
