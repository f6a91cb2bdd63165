# api/_resp.py
from typing import List

from fastapi import HTTPException

from core.formatting import format_distance, format_duration
from models.directions import Route, RouteView


def ok(data: dict | list | str | int | float | None = None, **extras):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if extras:
        payload.update(extras)
    return payload


def fail(status: int, message: str):
    raise HTTPException(status, message)


def route_views(routes: List[Route]) -> list[dict]:
    return [
        RouteView(
            duration=r.duration,
            distance=r.distance,
            legs=r.legs,
            formatted_duration=format_duration(r.duration),
            formatted_distance=format_distance(r.distance),
        ).model_dump()
        for r in routes
    ]
