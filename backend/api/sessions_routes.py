# api/sessions_routes.py
from typing import Optional

from fastapi import APIRouter, Body, Query
from pydantic import BaseModel

from api._resp import fail, ok, route_views
from core.exceptions import ProviderNotRegisteredError, RouteSelectionError
from models.directions import Failed
from services.session_store import PlanningSession, sessions

router = APIRouter(prefix="/sessions", tags=["sessions"])


# ───────────────────────── types ─────────────────────────


class SessionBody(BaseModel):
    start: str = ""
    destination: str = ""
    provider: Optional[str] = None


class QueryBody(BaseModel):
    start: Optional[str] = None
    destination: Optional[str] = None


class SelectBody(BaseModel):
    index: int


# ───────────────────────── helpers ─────────────────────────


def _get_or_404(session_id: str) -> PlanningSession:
    session = sessions.get(session_id)
    if session is None:
        fail(404, f"Unknown session '{session_id}'")
    return session


def _view(session: PlanningSession) -> dict:
    ctrl = session.controller
    state = ctrl.state
    query = ctrl.query
    return {
        "id": session.id,
        "provider": session.provider,
        "query": query.model_dump(),
        "can_lookup": query.is_complete(),
        "state": state.status,
        "routes": route_views(ctrl.routes),
        "error": state.message if isinstance(state, Failed) else None,
    }


# ───────────────────────── endpoints ─────────────────────────


@router.post("", summary="Start a planning session, optionally pre-seeded")
async def create_session(
    body: Optional[SessionBody] = Body(None),
    wait: bool = Query(False, description="Block until the initial lookup settles"),
):
    body = body or SessionBody()
    try:
        session = sessions.create(body.provider)
    except ProviderNotRegisteredError as e:
        fail(400, str(e))

    task = session.controller.initialize_from_session(body.start, body.destination)
    if task is not None and wait:
        await task
    return ok(_view(session))


@router.get("/{session_id}")
def get_session(session_id: str):
    return ok(_view(_get_or_404(session_id)))


@router.put("/{session_id}/query")
def update_query(session_id: str, body: QueryBody = Body(...)):
    session = _get_or_404(session_id)
    if body.start is not None:
        session.controller.set_start(body.start)
    if body.destination is not None:
        session.controller.set_destination(body.destination)
    return ok(_view(session))


@router.post("/{session_id}/lookup")
async def lookup(session_id: str, wait: bool = Query(False)):
    session = _get_or_404(session_id)
    task = session.controller.trigger_lookup()
    if task is None:
        fail(400, "start and destination are required")
    if wait:
        # a newer lookup may supersede this one; wait for whatever is current
        await task
        await session.controller.wait_idle()
    return ok(_view(session))


@router.post("/{session_id}/select")
def select_route(session_id: str, body: SelectBody = Body(...)):
    session = _get_or_404(session_id)
    try:
        message = session.controller.select_route_at(body.index)
    except RouteSelectionError as e:
        fail(409, str(e))
    return ok(message.model_dump())


@router.post("/{session_id}/back")
def go_back(session_id: str):
    session = _get_or_404(session_id)
    message = session.controller.reset()
    sessions.drop(session_id)
    return ok(message.model_dump())
