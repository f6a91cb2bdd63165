# services/route_request_controller.py
"""
Request lifecycle for one route planning session.

    Idle -> Loading -> Loaded(routes) | Failed(reason)
    Loaded / Failed -> Loading on the next lookup
    reset() -> Idle with cleared inputs

Lookups run as asyncio tasks on the running loop. Every lookup takes a new
token; a completion whose token is no longer current is dropped, so a slow
earlier request can never overwrite the result of a later one.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Set

from config import settings
from core.exceptions import DirectionsRequestError, RouteSelectionError, TransportError
from core.formatting import format_distance, format_duration
from core.interfaces import DirectionsClient, NavigationPort
from models.directions import (
    Failed,
    Idle,
    Loaded,
    Loading,
    LocationQuery,
    RequestState,
    Route,
)
from models.navigation import GoHome, GoToRoute

StateListener = Callable[[RequestState], None]


class RouteRequestController:
    def __init__(
        self,
        client: DirectionsClient,
        navigator: NavigationPort,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.navigator = navigator
        self.timeout = settings.LOOKUP_TIMEOUT_S if timeout is None else timeout
        self.log = logger or logging.getLogger(__name__)

        self._query = LocationQuery()
        self._state: RequestState = Idle()
        self._token = 0
        self._session_initialized = False
        self._listeners: List[StateListener] = []
        self._tasks: Set[asyncio.Task] = set()

    # ───────────── observed state ─────────────

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def query(self) -> LocationQuery:
        return self._query.model_copy()

    @property
    def routes(self) -> List[Route]:
        return list(self._state.routes) if isinstance(self._state, Loaded) else []

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _transition(self, state: RequestState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ───────────── inputs ─────────────

    def set_start(self, value: str) -> None:
        self._query.start = value

    def set_destination(self, value: str) -> None:
        self._query.destination = value

    # ───────────── lookup ─────────────

    def trigger_lookup(self) -> Optional[asyncio.Task]:
        """
        Start a lookup for the current inputs and return its task.
        With an empty start or destination this is a no-op returning None.
        Must be called from inside a running event loop.
        """
        if not self._query.is_complete():
            self.log.debug("lookup ignored: start and destination are required")
            return None

        loop = asyncio.get_running_loop()
        self._token += 1
        token = self._token
        start, destination = self._query.start, self._query.destination

        self._transition(Loading())
        task = loop.create_task(self._run_lookup(token, start, destination))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_lookup(self, token: int, start: str, destination: str) -> None:
        try:
            routes = await asyncio.wait_for(
                self.client.fetch_routes(start, destination), timeout=self.timeout
            )
            outcome: RequestState = Loaded(routes=list(routes))
        except asyncio.TimeoutError:
            outcome = Failed(
                reason=TransportError(f"directions lookup timed out after {self.timeout}s")
            )
        except DirectionsRequestError as e:
            outcome = Failed(reason=e)
        except Exception as e:
            self.log.exception("directions client raised an unexpected error")
            outcome = Failed(reason=e)

        if token != self._token:
            self.log.debug("dropping stale lookup #%d (current #%d)", token, self._token)
            return

        if isinstance(outcome, Failed):
            self.log.warning("lookup %r -> %r failed: %s", start, destination, outcome.message)
        else:
            self.log.info("lookup %r -> %r: %d route(s)", start, destination, len(outcome.routes))
        self._transition(outcome)

    def initialize_from_session(
        self, start: str = "", destination: str = ""
    ) -> Optional[asyncio.Task]:
        """Seed inputs from a previous page; looks up once if both are present."""
        if self._session_initialized:
            return None
        self._session_initialized = True
        self.set_start(start or "")
        self.set_destination(destination or "")
        return self.trigger_lookup()

    async def wait_idle(self) -> None:
        """Wait until no lookup task is pending."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ───────────── navigation ─────────────

    def select_route(self, route: Route) -> GoToRoute:
        loaded = self._state.routes if isinstance(self._state, Loaded) else []
        if not any(r is route for r in loaded):
            raise RouteSelectionError("route is not part of the loaded route list")
        message = GoToRoute(
            start=f"{self._query.start}",
            end=f"{self._query.destination}",
            directions=list(route.legs),
        )
        self.navigator.navigate(message)
        return message

    def select_route_at(self, index: int) -> GoToRoute:
        routes = self.routes
        if not 0 <= index < len(routes):
            raise RouteSelectionError(f"no route at index {index}")
        return self.select_route(routes[index])

    def reset(self) -> GoHome:
        """Back/cancel: leave the page, clear inputs and forget in-flight lookups."""
        self._token += 1
        self._query = LocationQuery()
        self._transition(Idle())
        message = GoHome()
        self.navigator.navigate(message)
        return message

    # ───────────── display ─────────────

    @staticmethod
    def formatted_duration(route: Route) -> str:
        return format_duration(route.duration)

    @staticmethod
    def formatted_distance(route: Route) -> str:
        return format_distance(route.distance)
