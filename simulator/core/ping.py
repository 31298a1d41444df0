"""Ping utility used by the API health-check."""

from typing import Mapping

from simulator.schemas.ping import PingResponse


def get_ping(settings: Mapping[str, object]) -> PingResponse:
    """Return the static pong plus which service and version answered."""
    return PingResponse(
        message="pong",
        service=str(settings.get("SERVICE_NAME", "")),
        version=str(settings.get("VERSION", "")),
    )
