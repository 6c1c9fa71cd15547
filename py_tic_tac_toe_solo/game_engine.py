import logging
import random
from collections.abc import Callable
from typing import TypeAlias

from py_tic_tac_toe_solo.board import Move, check_index
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.exception import LogicError
from py_tic_tac_toe_solo.game import Game
from py_tic_tac_toe_solo.outcome import Outcome, describe, is_over
from py_tic_tac_toe_solo.player_ai import create_ai_player
from py_tic_tac_toe_solo.score import ScoreBoard
from py_tic_tac_toe_solo.session import COMPUTER, HUMAN, Session, TurnState

logger = logging.getLogger(__name__)

Scheduler: TypeAlias = Callable[[float, Callable[[], None]], object]


def call_now(_delay: float, callback: Callable[[], None]) -> None:
    callback()


class GameEngine:
    def __init__(
        self,
        session: Session | None = None,
        *,
        computer_delay: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        self._session = session or Session()
        self._computer_delay = computer_delay
        self._rng = rng or random.Random()
        self._scheduler: Scheduler = call_now
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._message_cbs: list[Callable[[str], None]] = []
        self._score_updated_cbs: list[Callable[[ScoreBoard], None]] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def game(self) -> Game:
        return self._session.game

    @property
    def state(self) -> TurnState:
        return self._session.state

    @property
    def score(self) -> ScoreBoard:
        return self._session.score

    @property
    def difficulty(self) -> Difficulty:
        return self._session.difficulty

    def set_scheduler(self, scheduler: Scheduler) -> None:
        """Set how the computer's reply is deferred. The scheduler must call back on the caller's thread."""
        self._scheduler = scheduler

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_message_cb(self, callback: Callable[[str], None]) -> None:
        self._message_cbs.append(callback)

    def add_score_updated_cb(self, callback: Callable[[ScoreBoard], None]) -> None:
        self._score_updated_cbs.append(callback)

    def start(self) -> None:
        """Push the current state to every listener."""
        self._notify_board_updated()
        self._notify_score_updated()
        self._notify_message(describe(self.game.outcome))

    def select_cell(self, index: int) -> None:
        """Handle a human click. Ignored unless it is the human's turn and the cell is empty.

        Raises IndexError for an index outside the board, whatever the state.
        """
        check_index(index)
        if self._session.state is not TurnState.AWAITING_HUMAN:
            logger.debug("Ignoring cell %d while %s", index, self._session.state.name)
            return
        if not self.game.board.is_empty(index):
            logger.debug("Ignoring occupied cell %d", index)
            return

        outcome = self.game.apply_move(Move(HUMAN, index))
        self._notify_board_updated()
        if self._finish_round_if_over(outcome):
            return

        self._session.state = TurnState.AWAITING_COMPUTER
        round_number = self._session.round_number
        self._scheduler(self._computer_delay, lambda: self._computer_move(round_number))

    def set_difficulty(self, difficulty: Difficulty) -> None:
        if not isinstance(difficulty, Difficulty):
            msg = f"Unknown difficulty: {difficulty!r}"
            raise ValueError(msg)  # noqa: TRY004
        logger.info("Difficulty set to %s", difficulty)
        self._session.difficulty = difficulty

    def restart(self) -> None:
        self._session.restart()
        logger.info("Round %d started", self._session.round_number)
        self._notify_board_updated()
        self._notify_message("")

    def new_game(self) -> None:
        self._session.reset()
        logger.info("New game: score reset")
        self._notify_score_updated()
        self._notify_board_updated()
        self._notify_message("")

    def _computer_move(self, round_number: int) -> None:
        if round_number != self._session.round_number:
            logger.debug("Dropping computer move scheduled for round %d", round_number)
            return
        if self._session.state is not TurnState.AWAITING_COMPUTER:
            raise LogicError("Computer move fired outside the computer's turn")

        player = create_ai_player(self._session.difficulty, COMPUTER, self._rng)
        index = player.choose_move(self.game.board)
        if not self.game.board.is_empty(index):
            msg = f"{type(player).__name__} chose occupied cell {index}"
            raise LogicError(msg)

        outcome = self.game.apply_move(Move(COMPUTER, index))
        self._notify_board_updated()
        if self._finish_round_if_over(outcome):
            return
        self._session.state = TurnState.AWAITING_HUMAN

    def _finish_round_if_over(self, outcome: Outcome) -> bool:
        if not is_over(outcome):
            return False
        self._session.state = TurnState.ROUND_OVER
        self._session.score.record(outcome)
        message = describe(outcome)
        logger.info("Round %d over: %s", self._session.round_number, message)
        self._notify_score_updated()
        self._notify_message(message)
        return True

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_message(self, message: str) -> None:
        for callback in list(self._message_cbs):
            callback(message)

    def _notify_score_updated(self) -> None:
        for callback in list(self._score_updated_cbs):
            callback(self._session.score)
