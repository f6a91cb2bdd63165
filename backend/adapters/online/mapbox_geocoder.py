# adapters/online/mapbox_geocoder.py
from __future__ import annotations

import logging
from typing import Optional, Tuple
from urllib.parse import quote

import httpx

from adapters.online._http import get_json
from core.cache import TTLCache, geocode_cache
from core.exceptions import ParseError
from config import settings

logger = logging.getLogger(__name__)

LonLat = Tuple[float, float]


class MapboxGeocoder:
    """
    Forward geocoding of free text through the Mapbox Geocoding API.
    - Returns the best match as (lon, lat), or None when nothing matches.
    - Hits are cached per normalized query.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        cache: Optional[TTLCache] = None,
    ):
        self.api_key = api_key or settings.MAPBOX_TOKEN or "test-token"
        self.base_url = (base_url or settings.MAPBOX_GEOCODING_BASE).rstrip("/")
        self.cache = geocode_cache if cache is None else cache

    @staticmethod
    def _key(text: str) -> str:
        return " ".join(text.lower().split())

    async def geocode(self, client: httpx.AsyncClient, text: str) -> Optional[LonLat]:
        key = self._key(text)
        if not key:
            return None

        async def _lookup() -> Optional[LonLat]:
            # "/" inside a place name must not split the path
            place = quote(text.strip(), safe="")
            url = f"{self.base_url}/{place}.json"
            data = await get_json(
                client,
                url,
                {"limit": "1", "access_token": self.api_key},
                "Mapbox geocoding",
            )
            if not isinstance(data, dict):
                raise ParseError("Mapbox geocoding returned an unexpected payload")
            features = data.get("features") or []
            if not features:
                logger.info("no geocoding match for %r", text)
                return None
            try:
                lon, lat = features[0]["center"][:2]
                return (float(lon), float(lat))
            except (KeyError, TypeError, ValueError) as e:
                raise ParseError(f"Mapbox geocoding feature without center: {e}") from e

        return await self.cache.aget_or_set(key, _lookup)
