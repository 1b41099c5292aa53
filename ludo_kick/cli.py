from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass

from loguru import logger

from .config import config
from .game import Game


@dataclass
class PlayConfig:
    side: int
    players: list[str]
    ranks: list[str]
    seed: int | None
    log_level: str


def build_play_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Kick Ludo in the terminal")
    parser.add_argument("--side", type=int, default=config.TRACK_UNIT)
    parser.add_argument(
        "--players",
        type=str,
        default=config.PLAYERS,
        help="One character per player, in turn order",
    )
    parser.add_argument(
        "--ranks",
        type=str,
        default=config.RANKS,
        help="One character per piece of each player",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser


def parse_play_args(args: list[str] | None = None) -> PlayConfig:
    parser = build_play_parser()
    namespace = parser.parse_args(args=args)

    players = list(namespace.players)
    ranks = list(namespace.ranks)
    if namespace.side < 1:
        parser.error("--side must be at least 1")
    if len(players) < 2 or len(set(players)) != len(players):
        parser.error("--players needs at least 2 distinct characters")
    if not ranks or len(set(ranks)) != len(ranks):
        parser.error("--ranks needs at least 1 distinct character")
    if len(players) * len(ranks) > namespace.side * config.SIDES:
        parser.error("Too many pieces for the track; raise --side")

    return PlayConfig(
        side=namespace.side,
        players=players,
        ranks=ranks,
        seed=namespace.seed,
        log_level=namespace.log_level.upper(),
    )


def write_stdout(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else text + "\n")
    sys.stdout.flush()


def main(args: list[str] | None = None) -> int:
    cfg = parse_play_args(args)

    logger.remove()
    logger.add(sys.stderr, level=cfg.log_level)

    game = Game.from_random(
        track_unit=cfg.side,
        players=cfg.players,
        ranks=cfg.ranks,
        rng=random.Random(cfg.seed),
    )
    logger.debug(f"Starting game: side={cfg.side} players={cfg.players} seed={cfg.seed}")

    try:
        game.play(input, write_stdout)
    except (EOFError, KeyboardInterrupt):
        write_stdout("\nGame abandoned.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
