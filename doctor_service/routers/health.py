"""Liveness and readiness probes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from doctor_service.models.schemas import SERVICE_NAME, ProbeResponse, ProbeStatus
from doctor_service.services.readiness import ReadinessProbe, get_readiness_probe

router = APIRouter(prefix="/healthcheck", tags=["probes"])


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


@router.get(
    "/live",
    response_model=ProbeResponse,
    response_model_exclude_none=True,
    summary="Liveness probe",
)
async def live() -> ProbeResponse:
    """Report that the process is up. Never fails."""

    return ProbeResponse(status=ProbeStatus.up, service=SERVICE_NAME)


@router.get(
    "/ready",
    response_model=ProbeResponse,
    response_model_exclude_none=True,
    summary="Readiness probe",
    responses={
        status.HTTP_503_SERVICE_UNAVAILABLE: {
            "model": ProbeResponse,
            "description": "A readiness check failed.",
        }
    },
)
async def ready(
    probe: ReadinessProbe = Depends(get_readiness_probe),
) -> ProbeResponse | JSONResponse:
    """Report whether the service can take traffic."""

    try:
        await probe.evaluate()
    except Exception as exc:
        payload = ProbeResponse(
            status=ProbeStatus.not_ready,
            service=SERVICE_NAME,
            error=_error_message(exc),
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=payload.to_payload(),
        )

    return ProbeResponse(status=ProbeStatus.ready, service=SERVICE_NAME)


__all__ = ["router"]
