from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from loguru import logger

from .config import config
from .exceptions import MoveError
from .state import GameState, new_random_game
from .types import MoveResult, PieceName

Prompt = Callable[[str], str]
Writer = Callable[[str], None]

WIN_BANNER = "Congratulations! You have won!"


@dataclass(slots=True)
class Game:
    """Turn loop around an immutable GameState.

    Input and output are injected so the loop can be driven by a terminal or
    by scripted answers in tests.
    """

    players: List[str]
    ranks: List[str]
    state: GameState
    rng: random.Random = field(default_factory=random.Random)
    dice_sides: int = config.DICE_SIDES
    turns_played: int = field(default=0, init=False)

    @classmethod
    def from_random(
        cls,
        track_unit: int = config.TRACK_UNIT,
        players: Optional[List[str]] = None,
        ranks: Optional[List[str]] = None,
        rng: random.Random | None = None,
    ) -> "Game":
        players = list(players or config.PLAYER_SYMBOLS)
        ranks = list(ranks or config.RANK_SYMBOLS)
        rng = rng if rng is not None else random.Random()
        state = new_random_game(track_unit, players, ranks, rng)
        return cls(players=players, ranks=ranks, state=state, rng=rng)

    # --- Dice ---
    def roll_dice(self) -> int:
        return self.rng.randint(1, self.dice_sides)

    @property
    def is_over(self) -> bool:
        return self.state.num_players(self.players) <= 1

    def winner(self) -> Optional[str]:
        return self.state.winner(self.players)

    # --- Turns ---
    def take_turn(self, player: str, read_rank: Prompt, write: Writer) -> MoveResult:
        """Show the board, roll once and re-prompt until a legal move is entered."""
        write(self.state.render())
        write(f"{player}'s Turn!")
        dice = self.roll_dice()
        write(f"Dice: {dice}")
        logger.debug(f"Turn {self.turns_played}: {player} rolled {dice}")

        while True:
            answer = read_rank("Which piece to move? ").strip()
            if not answer:
                continue
            name = PieceName(player, answer[0])
            try:
                result = self.state.move(name, dice)
            except MoveError as e:
                write(f"Invalid move: {e}")
                continue
            break

        for kicked in result.kicked:
            write(f"{name} kicked {kicked.name}!")
            logger.info(f"{name} kicked {kicked.name} at {result.new_position}")

        self.state = result.state
        self.turns_played += 1
        return result

    def play(self, read_rank: Prompt, write: Writer) -> Optional[str]:
        """Rotate through the players until at most one still has pieces."""
        turn = 0
        while not self.is_over:
            player = self.players[turn]
            turn = (turn + 1) % len(self.players)
            if self.state.num_pieces(player) == 0:
                continue
            self.take_turn(player, read_rank, write)

        winner = self.winner()
        logger.info(f"Game over after {self.turns_played} turns, winner: {winner}")
        write(self.state.render())
        write(WIN_BANNER)
        write("=" * len(WIN_BANNER))
        return winner
