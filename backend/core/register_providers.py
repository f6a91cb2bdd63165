# core/register_providers.py
from __future__ import annotations
import logging
import os
from typing import Callable

from core.directions_registry import DirectionsClientRegistry
from core.interfaces import DirectionsClient
from adapters.online.mapbox_directions_adapter import MapboxDirectionsAdapter
from adapters.online.osrm_directions_adapter import OsrmDirectionsAdapter
from config import get_settings

logger = logging.getLogger(__name__)

_registered = False


def _safe_register(name: str, factory: Callable[[], DirectionsClient]) -> None:
    """Idempotent: a name registered earlier (e.g. by a test) wins."""
    if name in DirectionsClientRegistry.list_providers():
        return
    DirectionsClientRegistry.register(name, factory)


def register_providers() -> None:
    global _registered
    if _registered:
        return

    settings = get_settings()

    if not settings.MAPBOX_TOKEN:
        logger.warning("MAPBOX_TOKEN is not set; Mapbox requests will be rejected")

    _safe_register("mapbox", lambda: MapboxDirectionsAdapter())

    if os.getenv("ENABLE_OSRM", "1") != "0":
        _safe_register("osrm", lambda: OsrmDirectionsAdapter())

    logger.info("directions providers: %s", DirectionsClientRegistry.list_providers())
    _registered = True
