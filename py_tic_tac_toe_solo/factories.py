"""Factory functions for creating game components.

Provides factories for creating:
- Game engines from a Config
- UIs (terminal, tk, pygame)
"""

from typing import TYPE_CHECKING

from py_tic_tac_toe_solo.config import UI_CHOICES, Config
from py_tic_tac_toe_solo.game_engine import GameEngine
from py_tic_tac_toe_solo.session import Session

if TYPE_CHECKING:
    from py_tic_tac_toe_solo.ui import Ui


def create_game_engine(config: Config) -> GameEngine:
    return GameEngine(Session(difficulty=config.difficulty), computer_delay=config.computer_delay)


def create_ui(name: str, game_engine: GameEngine) -> "Ui":
    # Front ends are imported on demand so a missing tkinter or display only matters for the one chosen.
    match name:
        case "terminal":
            from py_tic_tac_toe_solo.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi(game_engine)
        case "tk":
            from py_tic_tac_toe_solo.ui_tk import TkUi  # noqa: PLC0415

            return TkUi(game_engine)
        case "pygame":
            from py_tic_tac_toe_solo.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case _:
            msg = f"Unknown UI: {name}. Choose from {', '.join(UI_CHOICES)}."
            raise ValueError(msg)
