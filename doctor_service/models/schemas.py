"""Pydantic models shared across the API."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

SERVICE_NAME = "doctor-service"


class ProbeStatus(str, Enum):
    up = "UP"
    ready = "READY"
    not_ready = "NOT_READY"


def current_timestamp() -> str:
    """Return the wall-clock time as an ISO-8601 string with the local UTC offset."""

    return datetime.now().astimezone().isoformat()


class ProbeResponse(BaseModel):
    """Payload returned by the liveness and readiness probes."""

    status: ProbeStatus
    timestamp: str = Field(
        default_factory=current_timestamp,
        description="Time the response was built, ISO-8601 including offset.",
    )
    service: str = Field(SERVICE_NAME, description="Name of the service answering the probe.")
    error: Optional[str] = Field(
        default=None,
        description="Failure message, only set when the service is not ready.",
    )

    def to_payload(self) -> dict[str, str]:
        """Serialize to JSON-ready data, leaving out ``error`` when unset."""

        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["SERVICE_NAME", "ProbeStatus", "ProbeResponse", "current_timestamp"]
