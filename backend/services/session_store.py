# services/session_store.py
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from config import settings
from core.cache import TTLCache
from core.directions_registry import create_directions_client
from services.navigation import RecordingNavigator
from services.route_request_controller import RouteRequestController


@dataclass
class PlanningSession:
    id: str
    provider: str
    controller: RouteRequestController
    navigator: RecordingNavigator = field(default_factory=RecordingNavigator)


class SessionStore:
    """In-memory planning sessions; idle sessions expire after SESSION_TTL_S."""

    def __init__(self, ttl_seconds: Optional[int] = None, maxsize: int = 500):
        self._cache = TTLCache(
            ttl_seconds=settings.SESSION_TTL_S if ttl_seconds is None else ttl_seconds,
            maxsize=maxsize,
        )

    def create(self, provider: Optional[str] = None) -> PlanningSession:
        name = (provider or settings.DIRECTIONS_PROVIDER).lower().strip()
        client = create_directions_client(name)
        navigator = RecordingNavigator()
        session = PlanningSession(
            id=uuid.uuid4().hex,
            provider=name,
            controller=RouteRequestController(client, navigator),
            navigator=navigator,
        )
        self._cache.set(session.id, session)
        return session

    def get(self, session_id: str) -> Optional[PlanningSession]:
        session = self._cache.get(session_id)
        if session is not None:
            self._cache.set(session_id, session)  # sliding expiry
        return session

    def drop(self, session_id: str) -> Optional[PlanningSession]:
        return self._cache.pop(session_id)

    def __len__(self) -> int:
        return len(self._cache)


sessions = SessionStore()
