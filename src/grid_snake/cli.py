"""Command line tools for Grid Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.game import GameSnapshot, SnakeGame

logger = logging.getLogger(__name__)

# Replay tokens that are not raw key identifiers.
_TICK_TOKENS = frozenset({"tick", "."})
_TOKEN_ALIASES: dict[str, str] = {
    "space": " ",
    "up": "ArrowUp",
    "down": "ArrowDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake headless replay and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- replay ---
    replay_p = sub.add_parser(
        "replay", help="Play a scripted game and print the final snapshot.",
    )
    replay_p.add_argument(
        "script", nargs="*",
        help="Tokens: 'start', 'tick' (or '.'), 'space', or key identifiers.",
    )
    replay_p.add_argument("--seed", type=int, default=None)
    replay_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    replay_p.add_argument(
        "--cells", action="store_true",
        help="Include the cell array in the printed snapshot.",
    )

    # --- config ---
    config_p = sub.add_parser("config", help="Write a config JSON file.")
    config_p.add_argument("output", help="Destination path.")
    config_p.add_argument("--seed", type=int, default=None)
    config_p.add_argument("--tick-rate-ms", type=int, default=None)

    return parser


def replay(tokens: list[str], game: SnakeGame) -> GameSnapshot:
    """Drive *game* through a token script and return the last snapshot."""
    snapshot = game.snapshot()
    for token in tokens:
        if token == "start":
            snapshot = game.start()
        elif token in _TICK_TOKENS:
            snapshot = game.tick()
        else:
            snapshot = game.press(_TOKEN_ALIASES.get(token, token))
    return snapshot


def _run_replay(args: argparse.Namespace) -> int:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    seed = args.seed if args.seed is not None else config.seed
    game = SnakeGame(rng=np.random.default_rng(seed))

    snapshot = replay(args.script, game)
    logger.info(
        "Replayed %d token(s): state=%s score=%d.",
        len(args.script), snapshot.state.value, snapshot.score,
    )
    print(json.dumps(snapshot.to_dict(include_cells=args.cells)))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.tick_rate_ms is not None:
        overrides["tick_rate_ms"] = args.tick_rate_ms

    try:
        config = GameConfig(**overrides)
    except ValueError as exc:
        logger.error("Invalid config: %s", exc)
        return 2
    config.save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "replay": _run_replay,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
