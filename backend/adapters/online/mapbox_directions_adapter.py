# adapters/online/mapbox_directions_adapter.py
from __future__ import annotations
from typing import List, Optional

import httpx

from adapters.online._http import get_json
from adapters.online.geocoded_directions import GeocodedDirectionsClient, parse_routes
from adapters.online.mapbox_geocoder import LonLat, MapboxGeocoder
from config import settings
from models.directions import Route


class MapboxDirectionsAdapter(GeocodedDirectionsClient):
    """
    DirectionsClient backed by the Mapbox Directions API.
    - Asks for alternatives with turn-by-turn steps; legs are passed through.
    - Durations in seconds, distances in meters (Mapbox defaults).
    """

    provider = "Mapbox directions"

    def __init__(
        self,
        api_key: Optional[str] = None,
        profile: Optional[str] = None,
        base_url: Optional[str] = None,
        geocoder: Optional[MapboxGeocoder] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.MAPBOX_TOKEN or "test-token"
        self.base_url = (base_url or settings.MAPBOX_DIRECTIONS_BASE).rstrip("/")
        super().__init__(
            geocoder=geocoder or MapboxGeocoder(api_key=self.api_key),
            profile=profile,
            timeout=timeout,
            transport=transport,
        )

    async def _route(
        self, client: httpx.AsyncClient, origin: LonLat, destination: LonLat
    ) -> List[Route]:
        url = f"{self.base_url}/{self.profile}/{self._path([origin, destination])}"
        data = await get_json(
            client,
            url,
            {
                "alternatives": "true",
                "steps": "true",
                "overview": "false",
                "access_token": self.api_key,
            },
            self.provider,
        )
        return parse_routes(data, self.provider)
