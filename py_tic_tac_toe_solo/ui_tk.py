import tkinter as tk
from collections.abc import Callable
from functools import partial
from typing import Final

from py_tic_tac_toe_solo.board import BOARD_SIZE, CELL_COUNT
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.game_engine import GameEngine
from py_tic_tac_toe_solo.score import ScoreBoard
from py_tic_tac_toe_solo.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"
    FONT: Final = ("Helvetica", 32)
    SMALL_FONT: Final = ("Helvetica", 14)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)

        self._difficulty_var = tk.StringVar(self._root, value=self._game_engine.difficulty.value)
        self._message_var = tk.StringVar(self._root, value="")
        self._x_wins_var = tk.StringVar(self._root, value="X: 0")
        self._o_wins_var = tk.StringVar(self._root, value="O: 0")
        self._draws_var = tk.StringVar(self._root, value="Draws: 0")

        self._build_grid()
        self._build_controls()
        super().run()
        self._game_engine.start()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._root.after(round(delay * 1000), callback)

    def _build_grid(self) -> None:
        for i in range(CELL_COUNT):
            btn = tk.Button(
                self._root,
                text="",
                width=5,
                height=2,
                font=self.FONT,
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row, column=col, padx=2, pady=2)
            self._buttons.append(btn)

    def _build_controls(self) -> None:
        controls_row = BOARD_SIZE
        tk.OptionMenu(
            self._root,
            self._difficulty_var,
            *(difficulty.value for difficulty in Difficulty),
            command=self._on_difficulty_changed,
        ).grid(row=controls_row, column=0, sticky="ew", padx=2, pady=4)
        tk.Button(self._root, text="Restart", command=self._restart).grid(row=controls_row, column=1, sticky="ew")
        tk.Button(self._root, text="New Game", command=self._new_game).grid(row=controls_row, column=2, sticky="ew")

        tk.Label(self._root, textvariable=self._message_var, font=self.SMALL_FONT).grid(
            row=controls_row + 1,
            column=0,
            columnspan=BOARD_SIZE,
            pady=4,
        )

        for col, var in enumerate((self._x_wins_var, self._o_wins_var, self._draws_var)):
            tk.Label(self._root, textvariable=var, font=self.SMALL_FONT).grid(row=controls_row + 2, column=col)

    def _on_click(self, index: int) -> None:
        if not self._input_enabled:
            return
        self._select_cell(index)

    def _on_difficulty_changed(self, value: str) -> None:
        self._set_difficulty(value)

    def _render_board(self) -> None:
        board = self._game_engine.game.board
        for i, btn in enumerate(self._buttons):
            value = board[i]
            btn.config(text=value if value is not None else "")

    def _show_message(self, message: str) -> None:
        self._message_var.set(message)

    def _render_score(self, score: ScoreBoard) -> None:
        self._x_wins_var.set(f"X: {score.x_wins}")
        self._o_wins_var.set(f"O: {score.o_wins}")
        self._draws_var.set(f"Draws: {score.draws}")
