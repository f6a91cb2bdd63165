from fastapi import APIRouter
from config import settings
from core.directions_registry import DirectionsClientRegistry

router = APIRouter(prefix="/status", tags=["status"])


@router.get("/providers")
def providers():
    return {
        "providers": DirectionsClientRegistry.list_providers(),
        "default": settings.DIRECTIONS_PROVIDER,
    }
