"""REST API route handlers for session lifecycle and input."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from grid_snake.server.models import (
    CreateSessionRequest,
    KeyRequest,
    SessionSummary,
)
from grid_snake.server.session_manager import SessionManager
from grid_snake.session import GameSession

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def _get_session(request: Request, session_id: str) -> GameSession:
    try:
        return _get_manager(request).require(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Session not found.") from exc


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create a new session waiting for its start action."""
    manager = _get_manager(request)
    client_ip = request.client.host if request.client else "unknown"
    try:
        session_id, session = manager.create_session(
            tick_rate_ms=body.tick_rate_ms,
            seed=body.seed,
            client_ip=client_ip,
        )
    except ValueError as exc:
        raise HTTPException(status_code=429, detail=str(exc)) from exc
    return SessionSummary(
        session_id=session_id,
        state=session.state,
        score=session.game.score,
        tick_rate_ms=session.config.tick_rate_ms,
    )


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List live sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get the current render snapshot."""
    return _get_session(request, session_id).snapshot().to_dict()


@router.post("/{session_id}/start")
async def start_session(session_id: str, request: Request) -> dict:
    """Explicit start action."""
    snapshot = await _get_session(request, session_id).start()
    return snapshot.to_dict()


@router.post("/{session_id}/keys")
async def press_key(session_id: str, body: KeyRequest, request: Request) -> dict:
    """Feed one raw key identifier into the game."""
    snapshot = await _get_session(request, session_id).press(body.key)
    return snapshot.to_dict()


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str, request: Request) -> Response:
    """Stop a session and forget it."""
    try:
        await _get_manager(request).close_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Session not found.") from exc
    return Response(status_code=204)
