# tests/fakes.py
import asyncio
from typing import List, Optional

from core.interfaces import DirectionsClient
from models.directions import Route

LEG_A = {"summary": "I-5 N", "steps": [{"maneuver": {"instruction": "Head north"}}]}
LEG_B = {"summary": "CA-99", "steps": []}


def make_route(duration=1200, distance=5000, legs=None) -> Route:
    return Route(duration=duration, distance=distance, legs=legs if legs is not None else [LEG_A])


class StaticDirectionsClient(DirectionsClient):
    """Answers every call with the same routes, or raises `error`."""

    def __init__(self, routes: Optional[List[Route]] = None, error: Optional[Exception] = None):
        self.routes = routes or []
        self.error = error
        self.calls: List[tuple] = []

    async def fetch_routes(self, start: str, destination: str) -> List[Route]:
        self.calls.append((start, destination))
        if self.error is not None:
            raise self.error
        return list(self.routes)


class GatedDirectionsClient(DirectionsClient):
    """
    Each call blocks until the test releases it, so completion order can be
    chosen independently of call order.
    """

    def __init__(self):
        self.calls: List[tuple] = []
        self._gates: List[asyncio.Event] = []
        self._outcomes: List[object] = []

    async def fetch_routes(self, start: str, destination: str) -> List[Route]:
        self.calls.append((start, destination))
        gate = asyncio.Event()
        self._gates.append(gate)
        self._outcomes.append(None)
        idx = len(self._gates) - 1
        await gate.wait()
        outcome = self._outcomes[idx]
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)

    def release(self, call_index: int, outcome) -> None:
        """Finish call #call_index with a route list or an exception."""
        self._outcomes[call_index] = outcome
        self._gates[call_index].set()


class HangingDirectionsClient(DirectionsClient):
    async def fetch_routes(self, start: str, destination: str) -> List[Route]:
        await asyncio.sleep(3600)
        return []
