# ruff: noqa: T201

import time
from collections.abc import Callable

from py_tic_tac_toe_solo.board import BOARD_SIZE, CELL_COUNT
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.score import ScoreBoard
from py_tic_tac_toe_solo.session import TurnState
from py_tic_tac_toe_solo.ui import Ui


class TerminalUi(Ui):
    HELP: str = (
        f"Commands: 1-{CELL_COUNT} place X, r restart, n new game, "
        f"d <{'|'.join(Difficulty)}> set difficulty, exit quit"
    )

    def run(self) -> None:
        super().run()
        print(self.HELP, flush=True)
        self._game_engine.start()
        while self._running:
            self._ask_for_input()
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        print("Computer is thinking...", flush=True)
        time.sleep(delay)
        callback()

    def _ask_for_input(self) -> None:
        if self._game_engine.state is TurnState.ROUND_OVER:
            print("Round over. r to restart, n for a new game: ", end="", flush=True)
        else:
            print(f"Your move (1-{CELL_COUNT}) [{self._game_engine.difficulty.label}]: ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        match input_str.strip().lower().split():
            case []:
                return
            case ["exit" | "quit"]:
                self._stop()
            case ["r" | "restart"]:
                self._restart()
            case ["n" | "new"]:
                self._new_game()
            case ["d" | "difficulty", value]:
                self._on_difficulty_input(value)
            case [value]:
                self._on_cell_input(value)
            case _:
                print(self.HELP, flush=True)

    def _on_cell_input(self, input_str: str) -> None:
        try:
            board_position = int(input_str)
        except ValueError:
            print("Not an integer", flush=True)
            return

        if not (1 <= board_position <= CELL_COUNT):
            print(f"Not between 1 and {CELL_COUNT}", flush=True)
            return

        index = board_position - 1
        if not self._input_enabled:
            print("Not your turn", flush=True)
            return
        if not self._game_engine.game.board.is_empty(index):
            print("Cell occupied", flush=True)
            return
        self._select_cell(index)

    def _on_difficulty_input(self, value: str) -> None:
        try:
            self._set_difficulty(value)
        except ValueError:
            print(f"Unknown difficulty {value!r}. Choose from {', '.join(Difficulty)}.", flush=True)
            return
        print(f"Difficulty: {self._game_engine.difficulty.label}", flush=True)

    def _render_board(self) -> None:
        rows = []
        for r, cells in enumerate(self._game_engine.game.board.rows()):
            row = " | ".join(
                value if value is not None else str(r * BOARD_SIZE + c + 1) for c, value in enumerate(cells)
            )
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _show_message(self, message: str) -> None:
        if message:
            print(message, flush=True)

    def _render_score(self, score: ScoreBoard) -> None:
        print(f"Score  X: {score.x_wins}  O: {score.o_wins}  Draws: {score.draws}", flush=True)
