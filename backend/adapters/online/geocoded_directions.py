# adapters/online/geocoded_directions.py
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from adapters.online.mapbox_geocoder import LonLat, MapboxGeocoder
from core.exceptions import LocationValidationError, ParseError, TransportError
from core.interfaces import DirectionsClient
from config import settings
from models.directions import Route

logger = logging.getLogger(__name__)

NO_ROUTE_CODES = ("NoRoute", "NoSegment")


def parse_routes(data: Any, provider: str) -> List[Route]:
    """
    Normalize a Mapbox/OSRM style `{code, routes: [{duration, distance, legs}]}`
    body into Route objects, keeping the service's order.
    """
    if not isinstance(data, dict):
        raise ParseError(f"{provider} returned an unexpected payload")

    code = data.get("code", "Ok")
    if code in NO_ROUTE_CODES:
        return []
    if code != "Ok":
        raise TransportError(f"{provider} error: {code} {data.get('message', '')}".strip())

    raw = data.get("routes")
    if raw is None:
        raise ParseError(f"{provider} response has no 'routes'")
    if not isinstance(raw, list):
        raise ParseError(f"{provider} 'routes' is not a list")

    routes: List[Route] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ParseError(f"{provider} route #{i} is not an object")
        missing = [k for k in ("duration", "distance", "legs") if k not in item]
        if missing:
            raise ParseError(f"{provider} route #{i} missing {', '.join(missing)}")
        try:
            routes.append(Route.model_validate(item))
        except ValidationError as e:
            raise ParseError(f"{provider} route #{i} is malformed: {e}") from e
    return routes


class GeocodedDirectionsClient(DirectionsClient):
    """Resolve both free-text places, then ask a routing backend for alternatives."""

    provider = "directions"

    def __init__(
        self,
        geocoder: Optional[MapboxGeocoder] = None,
        profile: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.geocoder = geocoder or MapboxGeocoder()
        self.profile = (profile or settings.DIRECTIONS_PROFILE).split("-")[0]
        self.timeout = settings.HTTP_TIMEOUT_S if timeout is None else timeout
        self._transport = transport

    @staticmethod
    def _path(points: List[LonLat]) -> str:
        return ";".join(f"{lon},{lat}" for lon, lat in points)

    @abstractmethod
    async def _route(
        self, client: httpx.AsyncClient, origin: LonLat, destination: LonLat
    ) -> List[Route]: ...

    async def fetch_routes(self, start: str, destination: str) -> List[Route]:
        if not start.strip() or not destination.strip():
            raise LocationValidationError("start and destination are required")

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            origin = await self.geocoder.geocode(client, start)
            target = await self.geocoder.geocode(client, destination)
            if origin is None or target is None:
                # an unresolvable place has no routes, it is not a failure
                return []
            routes = await self._route(client, origin, target)

        logger.info(
            "%s: %d route(s) for %r -> %r", self.provider, len(routes), start, destination
        )
        return routes
