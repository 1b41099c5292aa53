from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np

from .config import config
from .exceptions import BoardInvariantError

if TYPE_CHECKING:
    from .state import GameState


def grid_size(side: int) -> int:
    """Edge of the square character grid for a track with ``side`` squares per side."""
    return 1 + (side + 1) * 2 + 1


def cell_for_position(position: int, side: int) -> Tuple[int, int]:
    """Map a track position to the (x, y) cell of its 2x2 piece block.

    The track starts at the top-left corner and runs counter-clockwise: down
    the left side, right along the bottom, up the right side and back left
    along the top. Each square is two cells wide.
    """
    if not 0 <= position < config.SIDES * side:
        raise BoardInvariantError(f"Position {position} is off a track of side {side}")

    far = grid_size(side) - 3
    edge_index, offset = divmod(position, side)
    if edge_index == 0:
        return 1, 1 + offset * 2
    if edge_index == 1:
        return 1 + offset * 2, far
    if edge_index == 2:
        return far, far - offset * 2
    return far - offset * 2, 1


def build_grid(side: int) -> np.ndarray:
    """Blank (edge, edge) character grid with the outer and inner frames drawn."""
    edge = grid_size(side)
    inner = config.INNER_BORDER_OFFSET
    grid = np.full((edge, edge), config.BLANK_GLYPH, dtype="<U1")

    grid[0, :] = config.BORDER_GLYPH
    grid[-1, :] = config.BORDER_GLYPH
    grid[:, 0] = config.BORDER_GLYPH
    grid[:, -1] = config.BORDER_GLYPH

    # Inner frame spans inner..edge-inner-1 on both axes
    span = slice(inner, edge - inner)
    grid[inner, span] = config.BORDER_GLYPH
    grid[edge - inner - 1, span] = config.BORDER_GLYPH
    grid[span, inner] = config.BORDER_GLYPH
    grid[span, edge - inner - 1] = config.BORDER_GLYPH
    return grid


def render_board(state: GameState) -> str:
    side = state.side
    grid = build_grid(side)

    for pc in state.pieces:
        x, y = cell_for_position(pc.position, side)
        grid[y, x] = pc.player
        grid[y, x + 1] = config.CONNECTOR_GLYPH
        grid[y + 1, x] = config.CONNECTOR_GLYPH
        grid[y + 1, x + 1] = pc.rank

    return "".join("".join(row) + "\n" for row in grid)
