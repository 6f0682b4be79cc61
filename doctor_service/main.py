"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from typing import Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from doctor_service.config import get_settings
from doctor_service.logging import configure_logging
from doctor_service.models.schemas import SERVICE_NAME
from doctor_service.routers import health
from doctor_service.services.readiness import ReadinessCheck, ReadinessProbe

logger = logging.getLogger(__name__)


def create_app(readiness_checks: Iterable[ReadinessCheck] = ()) -> FastAPI:
    configure_logging()
    settings = get_settings()
    app = FastAPI(
        title="Doctor Service",
        version="1.0.0",
        summary="Liveness and readiness probes for the doctor service",
    )
    app.state.readiness = ReadinessProbe(readiness_checks)

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.cors_allow_origins],
            allow_methods=["GET"],
            allow_headers=["*"],
            allow_credentials=True,
        )

    app.include_router(health.router)

    logger.info(
        "%s ready to serve probes with %d readiness check(s)",
        SERVICE_NAME,
        len(app.state.readiness),
    )
    return app


app = create_app()


__all__ = ["app", "create_app"]
