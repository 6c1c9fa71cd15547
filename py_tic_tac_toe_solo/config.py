import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.exception import ConfigError

UI_CHOICES: Final = ("terminal", "tk", "pygame")
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Config:
    ui: str = "tk"
    difficulty: Difficulty = Difficulty.EASY
    computer_delay: float = 0.5
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.ui not in UI_CHOICES:
            msg = f"Unknown UI {self.ui!r}. Choose from {', '.join(UI_CHOICES)}."
            raise ConfigError(msg)
        if self.computer_delay < 0:
            msg = f"Computer delay must not be negative, got {self.computer_delay}."
            raise ConfigError(msg)
        if self.log_level not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}. Choose from {', '.join(LOG_LEVELS)}."
            raise ConfigError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Read TTT_UI, TTT_DIFFICULTY, TTT_COMPUTER_DELAY and LOG_LEVEL, falling back to the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        difficulty_value = _env(env, "TTT_DIFFICULTY", defaults.difficulty.value).lower()
        try:
            difficulty = Difficulty(difficulty_value)
        except ValueError as e:
            msg = f"Invalid TTT_DIFFICULTY {difficulty_value!r}. Choose from {', '.join(Difficulty)}."
            raise ConfigError(msg) from e

        delay_value = _env(env, "TTT_COMPUTER_DELAY", str(defaults.computer_delay))
        try:
            computer_delay = float(delay_value)
        except ValueError as e:
            msg = f"Invalid TTT_COMPUTER_DELAY {delay_value!r}: not a number."
            raise ConfigError(msg) from e

        return cls(
            ui=_env(env, "TTT_UI", defaults.ui).lower(),
            difficulty=difficulty,
            computer_delay=computer_delay,
            log_level=_env(env, "LOG_LEVEL", defaults.log_level).upper(),
        )


def _env(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is not None and value.strip() != "":
        return value.strip()
    return default
