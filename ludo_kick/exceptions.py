class MoveError(Exception):
    """Base exception for moves rejected by the game rules."""

    pass


class NoSuchPieceError(MoveError):
    """Raised when the requested piece is not on the board."""

    def __init__(self, message: str = "no such piece"):
        super().__init__(message)


class KickOwnError(MoveError):
    """Raised when a move would land on a piece of the same player."""

    def __init__(self, message: str = "can't kick own piece"):
        super().__init__(message)


class BoardInvariantError(RuntimeError):
    """Raised when a piece sits outside the track (a bug, never user input)."""

    pass
