# adapters/online/osrm_directions_adapter.py
from __future__ import annotations
from typing import List, Optional

import httpx

from adapters.online._http import get_json
from adapters.online.geocoded_directions import (
    NO_ROUTE_CODES,
    GeocodedDirectionsClient,
    parse_routes,
)
from adapters.online.mapbox_geocoder import LonLat, MapboxGeocoder
from config import settings
from models.directions import Route


class OsrmDirectionsAdapter(GeocodedDirectionsClient):
    """DirectionsClient backed by an OSRM /route service; places resolved via Mapbox."""

    provider = "OSRM"

    def __init__(
        self,
        base_url: Optional[str] = None,
        profile: Optional[str] = None,
        geocoder: Optional[MapboxGeocoder] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.OSRM_URL).rstrip("/")
        super().__init__(
            geocoder=geocoder, profile=profile, timeout=timeout, transport=transport
        )

    async def _route(
        self, client: httpx.AsyncClient, origin: LonLat, destination: LonLat
    ) -> List[Route]:
        url = f"{self.base_url}/route/v1/{self.profile}/{self._path([origin, destination])}"
        data = await get_json(
            client,
            url,
            {"alternatives": "true", "steps": "true", "overview": "false"},
            self.provider,
            passthrough_codes=NO_ROUTE_CODES,
        )
        return parse_routes(data, self.provider)
