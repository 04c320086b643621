"""Timer-driven game sessions on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.game import GameSnapshot, GameState, SnakeGame

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[GameSnapshot], Awaitable[None]]


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class TickTimer:
    """A cancellable periodic task calling *callback* every *interval* seconds.

    At most one task exists at a time. A task that has been cancelled or
    replaced never calls the callback again.
    """

    def __init__(
        self, interval: float, callback: Callable[[], Awaitable[None]],
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = interval
        self._callback = callback
        self._task: asyncio.Task | None = None
        self.armed_count = 0

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self) -> None:
        """Start ticking. Does nothing if already armed."""
        if self.active:
            return
        self._task = asyncio.create_task(self._run())
        self.armed_count += 1
        logger.debug("Tick timer armed (%.3fs).", self.interval)

    def cancel(self) -> asyncio.Task | None:
        """Stop ticking and return the detached task, if any.

        Called from inside the timer's own callback, the task is only
        detached: it finishes the current callback and then exits.
        """
        task, self._task = self._task, None
        if task is None or task.done():
            return None
        if task is not _current_task():
            task.cancel()
        logger.debug("Tick timer cancelled.")
        return task

    async def _run(self) -> None:
        me = _current_task()
        try:
            while self._task is me:
                await asyncio.sleep(self.interval)
                if self._task is not me:
                    break
                await self._callback()
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")


class GameSession:
    """One game, its tick timer and its snapshot listeners.

    Start, key presses and ticks are serialized behind a lock so each event
    finishes, listeners included, before the next one runs. The timer is
    armed exactly while the game is RUNNING.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        game: SnakeGame | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.game = game or SnakeGame(rng=np.random.default_rng(self.config.seed))
        self.timer = TickTimer(self.config.tick_interval, self._on_tick)
        self.lock = asyncio.Lock()
        self._listeners: list[SnapshotListener] = []
        self._last_published = self.game.snapshot()
        self.closed = False

    @property
    def state(self) -> GameState:
        return self.game.state

    def snapshot(self) -> GameSnapshot:
        return self.game.snapshot()

    def subscribe(self, listener: SnapshotListener) -> None:
        """Receive every snapshot committed from now on."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def start(self) -> GameSnapshot:
        """Explicit start action (not bound to a key)."""
        async with self.lock:
            return await self._commit(self.game.start())

    async def press(self, key: str) -> GameSnapshot:
        """Feed a raw key identifier into the game."""
        async with self.lock:
            return await self._commit(self.game.press(key))

    async def tick(self) -> GameSnapshot:
        """Run one tick now, outside the timer."""
        async with self.lock:
            return await self._commit(self.game.tick())

    async def _on_tick(self) -> None:
        async with self.lock:
            if self.game.state != GameState.RUNNING:
                return
            await self._commit(self.game.tick())

    async def _commit(self, snapshot: GameSnapshot) -> GameSnapshot:
        if not self.closed:
            self._sync_timer()
        # Ignored input leaves the snapshot unchanged; nothing to publish.
        if snapshot != self._last_published:
            self._last_published = snapshot
            await self._publish(snapshot)
        return snapshot

    def _sync_timer(self) -> None:
        if self.game.state == GameState.RUNNING:
            self.timer.arm()
        else:
            self.timer.cancel()

    async def _publish(self, snapshot: GameSnapshot) -> None:
        # Iterate over a copy so listeners can unsubscribe while we send.
        for listener in list(self._listeners):
            try:
                await listener(snapshot)
            except Exception:
                logger.warning("Dropping snapshot listener that failed.")
                self.unsubscribe(listener)

    async def close(self) -> None:
        """Stop the timer and drop listeners. Safe to call twice."""
        if self.closed:
            return
        self.closed = True
        task = self.timer.cancel()
        if task is not None and task is not _current_task():
            await asyncio.gather(task, return_exceptions=True)
        self._listeners.clear()
        logger.info("Session closed at tick %d.", self.game.tick_count)
