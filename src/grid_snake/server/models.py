"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_snake.config import DEFAULT_TICK_RATE_MS, MAX_TICK_RATE_MS
from grid_snake.game import GameState


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    tick_rate_ms: int = Field(default=DEFAULT_TICK_RATE_MS, ge=50, le=MAX_TICK_RATE_MS)
    seed: int | None = Field(default=None, ge=0)


class KeyRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/keys."""

    key: str = Field(min_length=1, max_length=16)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    state: GameState
    score: int
    tick_rate_ms: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
