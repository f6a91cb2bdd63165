# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Providers need a non-empty token; respx intercepts every call in tests
os.environ.setdefault("MAPBOX_TOKEN", "test-token")

# Import app only after setting env
from main import app
from core.cache import geocode_cache
from core.directions_registry import DirectionsClientRegistry
from fakes import StaticDirectionsClient, make_route, LEG_A, LEG_B


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _clear_geocode_cache():
    geocode_cache.clear()
    yield
    geocode_cache.clear()


@pytest.fixture
def fake_provider():
    """Register a 'fake' provider answering two routes for any query."""
    fake = StaticDirectionsClient(
        routes=[
            make_route(duration=1800, distance=16093.4, legs=[LEG_A]),
            make_route(duration=5400, distance=0, legs=[LEG_A, LEG_B]),
        ]
    )
    DirectionsClientRegistry.register("fake", lambda: fake)
    yield fake
    DirectionsClientRegistry.unregister("fake")
