# core/directions_registry.py
from typing import Callable, Dict
from core.exceptions import ProviderNotRegisteredError
from core.interfaces import DirectionsClient


class DirectionsClientRegistry:
    _factories: Dict[str, Callable[[], DirectionsClient]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[[], DirectionsClient]) -> None:
        key = name.lower().strip()
        if key in cls._factories:
            raise ValueError(f"Provider '{name}' is already registered.")
        cls._factories[key] = factory

    @classmethod
    def get(cls, name: str) -> DirectionsClient:
        key = name.lower().strip()
        if key not in cls._factories:
            raise ProviderNotRegisteredError(f"Provider '{name}' is not registered.")
        return cls._factories[key]()  # create instance

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._factories.pop(name.lower().strip(), None)

    @classmethod
    def list_providers(cls) -> list[str]:
        return sorted(cls._factories.keys())


def create_directions_client(name: str) -> DirectionsClient:
    return DirectionsClientRegistry.get(name)
