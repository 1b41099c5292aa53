"""
Kick Ludo
A terminal race around a square track where landing on a rival kicks it off.
"""

from .config import config
from .exceptions import BoardInvariantError, KickOwnError, MoveError, NoSuchPieceError
from .game import Game
from .render import cell_for_position, render_board
from .state import GameState, new_game, new_random_game
from .types import MoveResult, Piece, PieceName

__all__ = [
    "config",
    "Game",
    "GameState",
    "new_game",
    "new_random_game",
    "Piece",
    "PieceName",
    "MoveResult",
    "MoveError",
    "NoSuchPieceError",
    "KickOwnError",
    "BoardInvariantError",
    "cell_for_position",
    "render_board",
]
