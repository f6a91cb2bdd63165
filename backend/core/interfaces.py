from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List
from models.directions import Route
from models.navigation import NavigationMessage


class DirectionsClient(ABC):
    """All online directions providers must implement this."""

    @abstractmethod
    async def fetch_routes(self, start: str, destination: str) -> List[Route]: ...


class NavigationPort(ABC):
    """Receives page transitions emitted by the route request controller."""

    @abstractmethod
    def navigate(self, message: NavigationMessage) -> None: ...
