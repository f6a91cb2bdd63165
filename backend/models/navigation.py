# models/navigation.py
from __future__ import annotations
from typing import Any, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class HomeDirections(BaseModel):
    start: str = ""
    end: str = ""
    directions: List[Any] = Field(default_factory=list)


class GoHome(BaseModel):
    """Back/cancel: return to the home page with cleared directions."""

    model_config = ConfigDict(frozen=True)
    page: Literal["home"] = "home"
    directions: HomeDirections = Field(default_factory=HomeDirections)


class GoToRoute(BaseModel):
    """Open the turn-by-turn page for one selected route."""

    model_config = ConfigDict(frozen=True)
    page: Literal["route"] = "route"
    start: str
    end: str
    directions: List[Any]


NavigationMessage = Union[GoHome, GoToRoute]
