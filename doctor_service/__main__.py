"""Command line entrypoint for running the API with uvicorn."""
from __future__ import annotations

import uvicorn

from doctor_service.config import get_settings


if __name__ == "__main__":  # pragma: no cover - convenience entrypoint
    settings = get_settings()
    uvicorn.run(
        "doctor_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
