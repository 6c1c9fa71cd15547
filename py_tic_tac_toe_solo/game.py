from py_tic_tac_toe_solo.board import Board, Move, PlayerSymbol, opponent
from py_tic_tac_toe_solo.exception import InvalidMoveError
from py_tic_tac_toe_solo.outcome import Ongoing, Outcome, evaluate, is_over


class Game:
    """A single round: the current board, whose turn it is, and the result so far."""

    def __init__(self, first_player: PlayerSymbol = "X") -> None:
        self._board = Board()
        self._current_player: PlayerSymbol = first_player
        self._outcome: Outcome = Ongoing()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_player(self) -> PlayerSymbol:
        return self._current_player

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def is_over(self) -> bool:
        return is_over(self._outcome)

    def apply_move(self, move: Move) -> Outcome:
        if self.is_over():
            raise InvalidMoveError("Game over")

        if move.player != self._current_player:
            raise InvalidMoveError("Not your turn")

        self._board = self._board.place(move.index, move.player)
        self._outcome = evaluate(self._board)
        self._current_player = opponent(self._current_player)
        return self._outcome
