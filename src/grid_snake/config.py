"""Game session configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE_MS = 150
MIN_TICK_RATE_MS = 10
MAX_TICK_RATE_MS = 2000


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game session.

    Supports JSON serialization for reproducible runs.
    """

    tick_rate_ms: int = DEFAULT_TICK_RATE_MS
    seed: int | None = None

    def __post_init__(self) -> None:
        if not MIN_TICK_RATE_MS <= self.tick_rate_ms <= MAX_TICK_RATE_MS:
            raise ValueError(
                f"tick_rate_ms must be between {MIN_TICK_RATE_MS} and "
                f"{MAX_TICK_RATE_MS}."
            )

    @property
    def tick_interval(self) -> float:
        """Tick period in seconds."""
        return self.tick_rate_ms / 1000.0

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
