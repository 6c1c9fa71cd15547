from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final

from py_tic_tac_toe_solo.board import PlayerSymbol
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.game import Game
from py_tic_tac_toe_solo.score import ScoreBoard

HUMAN: Final[PlayerSymbol] = "X"
COMPUTER: Final[PlayerSymbol] = "O"


class TurnState(Enum):
    AWAITING_HUMAN = auto()
    AWAITING_COMPUTER = auto()
    ROUND_OVER = auto()


@dataclass
class Session:
    """Everything that lives for one play session: the current round, the tallies and the settings."""

    difficulty: Difficulty = Difficulty.EASY
    score: ScoreBoard = field(default_factory=ScoreBoard)
    game: Game = field(default_factory=lambda: Game(HUMAN))
    state: TurnState = TurnState.AWAITING_HUMAN
    round_number: int = 1

    def restart(self) -> None:
        """Start a new round, keeping the tallies."""
        self.game = Game(HUMAN)
        self.state = TurnState.AWAITING_HUMAN
        self.round_number += 1

    def reset(self) -> None:
        """Start a new round with zeroed tallies."""
        self.score.reset()
        self.restart()
