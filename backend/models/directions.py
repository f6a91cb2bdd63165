# models/directions.py
from __future__ import annotations
from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationQuery(BaseModel):
    start: str = ""
    destination: str = ""

    def is_complete(self) -> bool:
        return bool(self.start.strip()) and bool(self.destination.strip())


class Route(BaseModel):
    """One candidate path. Seconds and meters, legs passed through untouched."""

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    duration: float = Field(ge=0)
    distance: float = Field(ge=0)
    legs: List[Any]

    @field_validator("legs", mode="before")
    @classmethod
    def _legs_must_be_list(cls, v):
        # a dict or string would otherwise be coerced element-wise
        if not isinstance(v, (list, tuple)):
            raise ValueError("legs must be a list")
        return list(v)


# ---- request lifecycle ----
class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["loading"] = "loading"


class Loaded(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["loaded"] = "loaded"
    routes: List[Route] = Field(default_factory=list)


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
    status: Literal["failed"] = "failed"
    reason: Exception

    @property
    def message(self) -> str:
        return str(self.reason) or type(self.reason).__name__


RequestState = Union[Idle, Loading, Loaded, Failed]


# ---- HTTP bodies ----
class DirectionsRequest(BaseModel):
    start: str
    destination: str
    provider: Optional[str] = None


class RouteView(BaseModel):
    duration: float
    distance: float
    legs: List[Any]
    formatted_duration: str
    formatted_distance: str
