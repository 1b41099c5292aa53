import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Board ---
    TRACK_UNIT: int = int(os.getenv("TRACK_UNIT", 10))  # squares per side
    SIDES: int = 4
    INNER_BORDER_OFFSET: int = 3

    # --- Players ---
    PLAYERS: str = os.getenv("PLAYERS", "ABCD")
    RANKS: str = os.getenv("RANKS", "123")

    # --- Dice ---
    DICE_SIDES: int = int(os.getenv("DICE_SIDES", 6))

    # Viz Variables
    BORDER_GLYPH: str = "#"
    CONNECTOR_GLYPH: str = "\\"
    BLANK_GLYPH: str = " "

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    # Derived (populated in __post_init__ due to slots)
    TRACK_LENGTH: int = 0
    PLAYER_SYMBOLS: list[str] = field(default_factory=list)
    RANK_SYMBOLS: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.TRACK_LENGTH = self.TRACK_UNIT * self.SIDES
        self.PLAYER_SYMBOLS = list(self.PLAYERS)
        self.RANK_SYMBOLS = list(self.RANKS)

        if self.TRACK_UNIT < 1:
            raise ValueError("TRACK_UNIT must be at least 1")
        if self.DICE_SIDES < 1:
            raise ValueError("DICE_SIDES must be at least 1")
        if len(self.PLAYER_SYMBOLS) < 2:
            raise ValueError("PLAYERS must name at least 2 players")
        if len(set(self.PLAYER_SYMBOLS)) != len(self.PLAYER_SYMBOLS):
            raise ValueError("PLAYERS must not repeat a symbol")
        if not self.RANK_SYMBOLS:
            raise ValueError("RANKS must name at least 1 rank")
        if len(set(self.RANK_SYMBOLS)) != len(self.RANK_SYMBOLS):
            raise ValueError("RANKS must not repeat a symbol")
        if len(self.PLAYER_SYMBOLS) * len(self.RANK_SYMBOLS) > self.TRACK_LENGTH:
            raise ValueError("Not enough track squares for every piece")


config = Config()
