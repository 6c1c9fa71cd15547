import logging
import random
from abc import ABC, abstractmethod

from py_tic_tac_toe_solo.board import WIN_LINES, Board, PlayerSymbol, opponent
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.exception import NoLegalMoveError
from py_tic_tac_toe_solo.outcome import Draw, Win, evaluate

logger = logging.getLogger(__name__)

WIN_SCORE = 10


class AiPlayer(ABC):
    def __init__(self, symbol: PlayerSymbol = "O") -> None:
        self._symbol = symbol

    @property
    def symbol(self) -> PlayerSymbol:
        return self._symbol

    def choose_move(self, board: Board) -> int:
        """Pick an empty cell for this player. Raises NoLegalMoveError on a full board."""
        if board.is_full():
            msg = f"No moves available for player {self._symbol}."
            raise NoLegalMoveError(msg)
        index = self._find_move(board)
        logger.debug("%s (%s) chose cell %d on %s", type(self).__name__, self._symbol, index, board)
        return index

    @abstractmethod
    def _find_move(self, board: Board) -> int:
        pass


class RandomAiPlayer(AiPlayer):
    def __init__(self, symbol: PlayerSymbol = "O", rng: random.Random | None = None) -> None:
        super().__init__(symbol)
        self._rng = rng or random.Random()

    def _find_move(self, board: Board) -> int:
        return self._rng.choice(board.available_positions())


class HeuristicAiPlayer(RandomAiPlayer):
    """Take a winning cell, else block the opponent's winning cell, else play at random."""

    def _find_move(self, board: Board) -> int:
        move = find_line_completion(board, self._symbol)
        if move is None:
            move = find_line_completion(board, opponent(self._symbol))
        if move is None:
            move = super()._find_move(board)
        return move


class MinimaxAiPlayer(AiPlayer):
    """Exhaustive minimax without pruning or caching.

    Values are always seen from X: +10 for an X win, -10 for an O win, 0 for a
    draw. X maximizes and O minimizes whichever side is choosing. Ties go to
    the lowest cell index.
    """

    def _find_move(self, board: Board) -> int:
        best_score: int | None = None
        best_move = -1
        for index in board.available_positions():
            score = self._minimax(board.place(index, self._symbol), opponent(self._symbol))
            if best_score is None or self._is_better(score, best_score, self._symbol):
                best_score = score
                best_move = index
        return best_move

    def _minimax(self, board: Board, player: PlayerSymbol) -> int:
        match evaluate(board):
            case Win(player="X"):
                return WIN_SCORE
            case Win():
                return -WIN_SCORE
            case Draw():
                return 0

        scores = [self._minimax(board.place(index, player), opponent(player)) for index in board.available_positions()]
        return max(scores) if player == "X" else min(scores)

    @staticmethod
    def _is_better(score: int, best_score: int, player: PlayerSymbol) -> bool:
        return score > best_score if player == "X" else score < best_score


def find_line_completion(board: Board, player: PlayerSymbol) -> int | None:
    """Return the open cell of the first line holding two of ``player``'s marks and one empty cell."""
    for line in WIN_LINES:
        cells = [board[i] for i in line]
        if cells.count(player) == 2 and cells.count(None) == 1:  # noqa: PLR2004
            return line[cells.index(None)]
    return None


AI_PLAYERS: dict[Difficulty, type[AiPlayer]] = {
    Difficulty.EASY: MinimaxAiPlayer,
    Difficulty.MEDIUM: HeuristicAiPlayer,
    Difficulty.HARD: RandomAiPlayer,
}


def create_ai_player(
    difficulty: Difficulty,
    symbol: PlayerSymbol = "O",
    rng: random.Random | None = None,
) -> AiPlayer:
    """Build the strategy for ``difficulty``. ``rng`` feeds the strategies that play at random."""
    try:
        player_cls = AI_PLAYERS[Difficulty(difficulty)]
    except ValueError as e:
        msg = f"Unknown difficulty: {difficulty!r}. Choose from {', '.join(Difficulty)}."
        raise ValueError(msg) from e
    if issubclass(player_cls, RandomAiPlayer):
        return player_cls(symbol, rng)
    return player_cls(symbol)
