from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from .state import GameState


@dataclass(frozen=True, slots=True)
class PieceName:
    """(player, rank) pair naming exactly one piece in a game."""

    player: str
    rank: str

    def __str__(self) -> str:
        return f"{self.player}{self.rank}"


@dataclass(frozen=True, slots=True)
class Piece:
    """Lightweight piece model. Holds state only.

    Collision rules live in GameState; board mapping lives in the renderer.
    """

    name: PieceName
    position: int  # 0..track_length-1

    @property
    def player(self) -> str:
        return self.name.player

    @property
    def rank(self) -> str:
        return self.name.rank

    def moved_to(self, new_position: int) -> Piece:
        return replace(self, position=new_position)


@dataclass(frozen=True, slots=True)
class MoveResult:
    state: GameState
    piece: Piece
    old_position: int
    new_position: int
    kicked: Tuple[Piece, ...] = ()
