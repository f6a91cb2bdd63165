# services/navigation.py
from __future__ import annotations
from typing import List, Optional

from core.interfaces import NavigationPort
from models.navigation import NavigationMessage


class RecordingNavigator(NavigationPort):
    """Keeps emitted page transitions for hosts that poll instead of subscribe."""

    def __init__(self) -> None:
        self.messages: List[NavigationMessage] = []

    def navigate(self, message: NavigationMessage) -> None:
        self.messages.append(message)

    @property
    def last(self) -> Optional[NavigationMessage]:
        return self.messages[-1] if self.messages else None
