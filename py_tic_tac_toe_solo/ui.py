from abc import ABC, abstractmethod
from collections.abc import Callable

from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.game_engine import GameEngine
from py_tic_tac_toe_solo.score import ScoreBoard
from py_tic_tac_toe_solo.session import TurnState


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._game_engine.set_scheduler(self.schedule)
        self._game_engine.add_board_updated_cb(self.on_board_updated)
        self._game_engine.add_message_cb(self.on_message)
        self._game_engine.add_score_updated_cb(self.on_score_updated)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    @property
    def _input_enabled(self) -> bool:
        return self._running and self._game_engine.state is TurnState.AWAITING_HUMAN

    def _select_cell(self, index: int) -> None:
        self._game_engine.select_cell(index)

    def _set_difficulty(self, value: str) -> None:
        self._game_engine.set_difficulty(Difficulty(value))

    def _restart(self) -> None:
        self._game_engine.restart()

    def _new_game(self) -> None:
        self._game_engine.new_game()

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._render_board()

    def on_message(self, message: str) -> None:
        if not self._running:
            return
        self._show_message(message)

    def on_score_updated(self, score: ScoreBoard) -> None:
        if not self._running:
            return
        self._render_score(score)

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the UI thread after ``delay`` seconds."""

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _render_score(self, score: ScoreBoard) -> None:
        pass
