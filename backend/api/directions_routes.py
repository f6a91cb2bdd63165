# api/directions_routes.py
from fastapi import APIRouter, Body

from api._resp import fail, ok, route_views
from config import settings
from core.directions_registry import create_directions_client
from core.exceptions import (
    LocationValidationError,
    ParseError,
    ProviderNotRegisteredError,
    TransportError,
)
from models.directions import DirectionsRequest

router = APIRouter(prefix="/directions", tags=["directions"])


@router.post("", summary="Look up candidate routes between two free-text places")
async def get_directions(req: DirectionsRequest = Body(...)):
    if not req.start.strip() or not req.destination.strip():
        fail(400, "start and destination are required")

    provider = req.provider or settings.DIRECTIONS_PROVIDER
    try:
        client = create_directions_client(provider)
        routes = await client.fetch_routes(req.start, req.destination)
    except ProviderNotRegisteredError as e:
        fail(400, str(e))
    except LocationValidationError as e:
        fail(400, str(e))
    except TransportError as e:
        fail(502, f"Upstream error: {e}")
    except ParseError as e:
        fail(502, f"Malformed upstream response: {e}")

    return ok(
        {
            "start": req.start,
            "destination": req.destination,
            "provider": provider,
            "routes": route_views(routes),
        }
    )
