"""In-memory session registry with creation limits."""

from __future__ import annotations

import logging
import time
import uuid

from grid_snake.config import GameConfig
from grid_snake.server.models import SessionSummary
from grid_snake.session import GameSession

logger = logging.getLogger(__name__)

# Simple rate limit: max sessions created per IP within the window.
_RATE_LIMIT_WINDOW = 60.0  # seconds
_RATE_LIMIT_MAX = 10
_RATE_COMPACT_INTERVAL = 60.0  # seconds between stale-key sweeps
_MAX_SESSIONS = 100


class SessionManager:
    """Central registry of live game sessions."""

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: dict[str, GameSession] = {}
        self._rate_limits: dict[str, list[float]] = {}
        self._last_rate_compact: float = 0.0
        self._max_sessions = max_sessions

    def _check_rate_limit(self, client_ip: str) -> bool:
        """Return True if the client is within rate limits."""
        now = time.monotonic()
        timestamps = self._rate_limits.get(client_ip, [])
        timestamps = [t for t in timestamps if now - t < _RATE_LIMIT_WINDOW]
        if timestamps:
            self._rate_limits[client_ip] = timestamps
        else:
            self._rate_limits.pop(client_ip, None)
        self._compact_rate_limits(now)
        return len(timestamps) < _RATE_LIMIT_MAX

    def _compact_rate_limits(self, now: float) -> None:
        """Remove rate-limit entries whose timestamps have all expired."""
        if now - self._last_rate_compact < _RATE_COMPACT_INTERVAL:
            return
        self._last_rate_compact = now
        stale_ips = [
            ip for ip, ts in self._rate_limits.items()
            if all(now - t >= _RATE_LIMIT_WINDOW for t in ts)
        ]
        for ip in stale_ips:
            del self._rate_limits[ip]
        if stale_ips:
            logger.info(
                "Compacted %d stale rate-limit entries.", len(stale_ips),
            )

    def _record_creation(self, client_ip: str) -> None:
        self._rate_limits.setdefault(client_ip, []).append(time.monotonic())

    def create_session(
        self,
        tick_rate_ms: int | None = None,
        seed: int | None = None,
        client_ip: str = "unknown",
    ) -> tuple[str, GameSession]:
        """Create a new, not yet started session and return it with its id."""
        if not self._check_rate_limit(client_ip):
            raise ValueError("Rate limit exceeded. Try again later.")
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many live sessions.")

        if tick_rate_ms is None:
            config = GameConfig(seed=seed)
        else:
            config = GameConfig(tick_rate_ms=tick_rate_ms, seed=seed)

        session_id = uuid.uuid4().hex[:12]
        self._sessions[session_id] = GameSession(config)
        self._record_creation(client_ip)
        logger.info("Session %s created.", session_id)
        return session_id, self._sessions[session_id]

    def get_session(self, session_id: str) -> GameSession | None:
        return self._sessions.get(session_id)

    def require(self, session_id: str) -> GameSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        return session

    def list_sessions(self) -> list[SessionSummary]:
        """Return summaries of every live session."""
        return [
            SessionSummary(
                session_id=sid,
                state=s.state,
                score=s.game.score,
                tick_rate_ms=s.config.tick_rate_ms,
            )
            for sid, s in self._sessions.items()
        ]

    async def close_session(self, session_id: str) -> None:
        """Close a session and remove it from the registry."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        await session.close()

    async def cleanup(self) -> None:
        """Close all sessions and release rate-limit state."""
        sessions = list(self._sessions.values())
        self._sessions.clear()
        for session in sessions:
            await session.close()
        self._rate_limits.clear()
        logger.info("SessionManager cleanup complete.")
