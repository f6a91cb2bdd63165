# backend/config.py
from __future__ import annotations
from pathlib import Path
import os
from dotenv import load_dotenv

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def get_settings():
    return Settings


class Settings:
    MAPBOX_TOKEN: str = os.getenv("MAPBOX_TOKEN", "") or os.getenv(
        "MAPBOX_ACCESS_TOKEN", ""
    )
    MAPBOX_GEOCODING_BASE: str = os.getenv(
        "MAPBOX_GEOCODING_BASE", "https://api.mapbox.com/geocoding/v5/mapbox.places"
    )
    MAPBOX_DIRECTIONS_BASE: str = os.getenv(
        "MAPBOX_DIRECTIONS_BASE", "https://api.mapbox.com/directions/v5/mapbox"
    )
    OSRM_URL: str = os.getenv("OSRM_URL", "https://router.project-osrm.org")

    DIRECTIONS_PROVIDER: str = os.getenv("DIRECTIONS_PROVIDER", "mapbox")
    DIRECTIONS_PROFILE: str = os.getenv("DIRECTIONS_PROFILE", "driving")

    HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "15.0"))
    # whole lookup (two geocodes + one directions call)
    LOOKUP_TIMEOUT_S: float = float(os.getenv("LOOKUP_TIMEOUT_S", "20.0"))
    GEOCODE_CACHE_TTL_S: int = int(os.getenv("GEOCODE_CACHE_TTL_S", "300"))
    SESSION_TTL_S: int = int(os.getenv("SESSION_TTL_S", "1800"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000")


settings = Settings
