"""Load test: many sessions ticking simultaneously."""

from __future__ import annotations

import asyncio
from unittest.mock import patch

import pytest

from grid_snake.game import GameState
from grid_snake.server import session_manager as sm_mod
from grid_snake.server.session_manager import SessionManager


class TestConcurrentSessions:
    @pytest.mark.asyncio
    async def test_50_concurrent_sessions(self):
        """Start 50 sessions; every snake runs up into the wall."""
        manager = SessionManager()
        sessions = []
        for i in range(50):
            _, session = manager.create_session(
                tick_rate_ms=10, seed=i, client_ip=f"test-{i % 10}",
            )
            sessions.append(session)

        for session in sessions:
            await session.start()

        for _ in range(200):
            await asyncio.sleep(0.05)
            if all(s.state == GameState.GAME_OVER for s in sessions):
                break

        finished = sum(1 for s in sessions if s.state == GameState.GAME_OVER)
        assert finished == 50, f"Only {finished}/50 sessions finished"
        assert not any(s.timer.active for s in sessions)
        assert all(s.timer.armed_count == 1 for s in sessions)
        await manager.cleanup()


class TestSessionManager:
    def test_invalid_max_sessions(self):
        with pytest.raises(ValueError, match="at least 1"):
            SessionManager(max_sessions=0)

    @pytest.mark.asyncio
    async def test_rate_limiting(self):
        """Verify rate limiter blocks excessive creation from one IP."""
        manager = SessionManager()
        for _ in range(10):
            manager.create_session(client_ip="same-ip")

        with pytest.raises(ValueError, match="Rate limit"):
            manager.create_session(client_ip="same-ip")

        # Different IP should still work.
        manager.create_session(client_ip="other-ip")
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_session_cap(self):
        manager = SessionManager(max_sessions=2)
        manager.create_session(client_ip="a")
        manager.create_session(client_ip="b")
        with pytest.raises(ValueError, match="Too many"):
            manager.create_session(client_ip="c")
        await manager.cleanup()

    @pytest.mark.asyncio
    async def test_rate_limit_stale_entry_removed_on_check(self):
        manager = SessionManager()
        manager._rate_limits["stale-ip"] = [0.0]
        manager._check_rate_limit("stale-ip")
        assert "stale-ip" not in manager._rate_limits

    @pytest.mark.asyncio
    async def test_rate_limit_compaction_sweeps_stale_keys(self):
        manager = SessionManager()
        manager._rate_limits["old-ip-1"] = [0.0]
        manager._rate_limits["old-ip-2"] = [0.0]
        manager._last_rate_compact = 0.0
        with patch.object(sm_mod, "_RATE_COMPACT_INTERVAL", 0.0):
            manager._check_rate_limit("trigger-ip")
        assert "old-ip-1" not in manager._rate_limits
        assert "old-ip-2" not in manager._rate_limits

    @pytest.mark.asyncio
    async def test_close_session(self):
        manager = SessionManager()
        session_id, session = manager.create_session(tick_rate_ms=2000)
        await session.start()
        await manager.close_session(session_id)
        assert manager.get_session(session_id) is None
        assert not session.timer.active
        with pytest.raises(KeyError):
            await manager.close_session(session_id)

    @pytest.mark.asyncio
    async def test_cleanup_closes_everything(self):
        manager = SessionManager()
        _, a = manager.create_session(tick_rate_ms=2000, client_ip="ip-1")
        _, b = manager.create_session(tick_rate_ms=2000, client_ip="ip-2")
        await a.start()
        await b.start()
        await manager.cleanup()
        assert a.closed and b.closed
        assert manager.list_sessions() == []
        assert len(manager._rate_limits) == 0
