from collections.abc import Callable
from typing import Final

import pygame

from py_tic_tac_toe_solo.board import BOARD_SIZE
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.game_engine import GameEngine
from py_tic_tac_toe_solo.score import ScoreBoard
from py_tic_tac_toe_solo.session import TurnState
from py_tic_tac_toe_solo.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    PANEL_HEIGHT: Final = 120
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    DIFFICULTY_KEYS: Final = {
        pygame.K_1: Difficulty.EASY,
        pygame.K_2: Difficulty.MEDIUM,
        pygame.K_3: Difficulty.HARD,
    }

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board = self._game_engine.game.board
        self._message = ""
        self._score_text = ""
        self._pending: list[tuple[int, Callable[[], None]]] = []

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.PANEL_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._small_font = pygame.font.SysFont(None, 36)
        self._help_font = pygame.font.SysFont(None, 22)

        super().run()
        self._game_engine.start()
        self._main_loop()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._pending.append((pygame.time.get_ticks() + round(delay * 1000), callback))

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._run_due_callbacks()
            self._handle_events()
            self._render()
        pygame.quit()

    def _run_due_callbacks(self) -> None:
        now = pygame.time.get_ticks()
        due = [callback for when, callback in self._pending if when <= now]
        self._pending = [(when, callback) for when, callback in self._pending if when > now]
        for callback in due:
            callback()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    if self._input_enabled:
                        self._on_click(event.pos)
                case pygame.KEYDOWN:
                    self._on_key(event.key)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        self._select_cell(row * BOARD_SIZE + col)

    def _on_key(self, key: int) -> None:
        if key in self.DIFFICULTY_KEYS:
            self._set_difficulty(self.DIFFICULTY_KEYS[key])
        elif key == pygame.K_r:
            self._restart()
        elif key == pygame.K_n:
            self._new_game()
        elif key == pygame.K_ESCAPE:
            self._stop()

    def _render_board(self) -> None:
        self._board = self._game_engine.game.board

    def _show_message(self, message: str) -> None:
        self._message = message

    def _render_score(self, score: ScoreBoard) -> None:
        self._score_text = f"X: {score.x_wins}   O: {score.o_wins}   Draws: {score.draws}"

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )
        pygame.draw.line(
            self._screen,
            self.LINE_COLOR,
            (0, self.WINDOW_SIZE),
            (self.WINDOW_SIZE, self.WINDOW_SIZE),
            self.LINE_WIDTH,
        )

    def _draw_marks(self) -> None:
        for index, value in enumerate(self._board):
            if value is None:
                continue
            row, col = divmod(index, BOARD_SIZE)
            text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(
                center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
            )
            self._screen.blit(text, rect)

    def _draw_panel(self) -> None:
        status = self._message
        if not status:
            status = "Thinking..." if self._game_engine.state is TurnState.AWAITING_COMPUTER else "Your move"
        lines = (
            (self._small_font, status),
            (self._small_font, self._score_text),
            (self._help_font, f"Difficulty: {self._game_engine.difficulty.label}   1/2/3 set, R restart, N new game"),
        )
        y = self.WINDOW_SIZE + 22
        for font, line in lines:
            text = font.render(line, True, self.TEXT_COLOR)  # noqa: FBT003
            self._screen.blit(text, text.get_rect(center=(self.WINDOW_SIZE // 2, y)))
            y += 36
