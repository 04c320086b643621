"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from grid_snake.game import GameSnapshot
from grid_snake.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


def _encode(snapshot: GameSnapshot) -> str:
    return json.dumps(snapshot.to_dict(), separators=(",", ":"))


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send keys, receive a snapshot per committed change."""
    session = _get_manager(websocket).get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()

    async def send_snapshot(snapshot: GameSnapshot) -> None:
        if websocket.client_state != WebSocketState.CONNECTED:
            raise RuntimeError("Socket is no longer connected.")
        await websocket.send_text(_encode(snapshot))

    # Send initial state snapshot so the client can draw immediately.
    await websocket.send_text(_encode(session.snapshot()))
    session.subscribe(send_snapshot)
    logger.info("Player connected to session %s.", session_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("action") == "start":
                await session.start()
                continue

            key = msg.get("key")
            if isinstance(key, str):
                await session.press(key)
    except WebSocketDisconnect:
        logger.info("Player disconnected from session %s.", session_id)
    finally:
        session.unsubscribe(send_snapshot)
