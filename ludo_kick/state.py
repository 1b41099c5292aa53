"""
Game state for the square-track race.
All state is immutable; moves return new state values.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .config import config
from .exceptions import KickOwnError, NoSuchPieceError
from .render import render_board
from .types import MoveResult, Piece, PieceName


@dataclass(frozen=True, slots=True)
class GameState:
    """Track length plus the ordered pieces still on the board."""

    track_length: int
    pieces: Tuple[Piece, ...] = ()

    @property
    def side(self) -> int:
        return self.track_length // config.SIDES

    # --- Lookups ---
    def _index_of(self, name: PieceName) -> int:
        for i, pc in enumerate(self.pieces):
            if pc.name == name:
                return i
        raise NoSuchPieceError()

    def piece(self, name: PieceName) -> Piece:
        return self.pieces[self._index_of(name)]

    def pieces_of(self, player: str) -> Tuple[Piece, ...]:
        return tuple(pc for pc in self.pieces if pc.player == player)

    # --- Moves ---
    def move(self, name: PieceName, amount: int) -> MoveResult:
        """Move ``name`` forward by ``amount`` squares and resolve collisions.

        Opponent pieces on the destination are kicked off the board. Landing on
        another piece of the same player raises KickOwnError and leaves this
        state as it was.

        Args:
            name: The piece to move.
            amount: Squares to advance; wraps around the track.

        Returns:
            MoveResult: The new state, the moved piece and any kicked pieces.
        """
        idx = self._index_of(name)
        old = self.pieces[idx]
        mover = old.moved_to((old.position + amount) % self.track_length)

        survivors: List[Piece] = []
        kicked: List[Piece] = []
        for i, pc in enumerate(self.pieces):
            if i == idx:
                survivors.append(mover)
            elif pc.position != mover.position:
                survivors.append(pc)
            elif pc.player == mover.player:
                logger.debug(f"Rejected {name}: {pc.name} already at {mover.position}")
                raise KickOwnError()
            else:
                kicked.append(pc)

        for pc in kicked:
            logger.debug(f"{name} kicked {pc.name} at {mover.position}")

        return MoveResult(
            state=GameState(self.track_length, tuple(survivors)),
            piece=mover,
            old_position=old.position,
            new_position=mover.position,
            kicked=tuple(kicked),
        )

    def moved(self, name: PieceName, amount: int) -> GameState:
        return self.move(name, amount).state

    # --- Queries ---
    def num_pieces(self, player: str) -> int:
        return sum(1 for pc in self.pieces if pc.player == player)

    def num_players(self, players: Iterable[str]) -> int:
        return sum(1 for player in players if self.num_pieces(player) > 0)

    def remaining_players(self, players: Iterable[str]) -> List[str]:
        return [player for player in players if self.num_pieces(player) > 0]

    def winner(self, players: Iterable[str]) -> Optional[str]:
        remaining = self.remaining_players(players)
        return remaining[0] if len(remaining) == 1 else None

    def render(self) -> str:
        return render_board(self)

    def __str__(self) -> str:
        return self.render()


def new_game(track_unit: int, pieces: Sequence[Piece]) -> GameState:
    """Build a state on a square track with ``track_unit`` squares per side."""
    if track_unit < 1:
        raise ValueError("track_unit must be at least 1")
    return GameState(track_length=track_unit * config.SIDES, pieces=tuple(pieces))


def new_random_game(
    track_unit: int,
    players: Sequence[str],
    ranks: Sequence[str],
    rng: random.Random | None = None,
) -> GameState:
    """Place one piece per (player, rank) on distinct random squares.

    Positions are drawn without replacement from a shuffled permutation of the
    whole track, in player-major order.
    """
    if rng is None:
        rng = random.Random()
    length = track_unit * config.SIDES
    if len(players) * len(ranks) > length:
        raise ValueError(
            f"Cannot place {len(players) * len(ranks)} pieces on {length} squares"
        )

    positions = list(range(length))
    rng.shuffle(positions)
    free = iter(positions)

    pieces = [
        Piece(PieceName(player, rank), next(free))
        for player in players
        for rank in ranks
    ]
    logger.debug(f"Random game: {len(pieces)} pieces on {length} squares")
    return new_game(track_unit, pieces)
