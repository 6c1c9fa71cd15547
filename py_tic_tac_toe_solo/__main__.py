import argparse
import logging

from py_tic_tac_toe_solo.config import LOG_LEVELS, UI_CHOICES, Config
from py_tic_tac_toe_solo.difficulty import Difficulty
from py_tic_tac_toe_solo.exception import ConfigError
from py_tic_tac_toe_solo.factories import create_game_engine, create_ui
from py_tic_tac_toe_solo.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        env_config = Config.from_env()
        config = Config(
            ui=args.ui or env_config.ui,
            difficulty=Difficulty(args.difficulty) if args.difficulty else env_config.difficulty,
            computer_delay=args.delay if args.delay is not None else env_config.computer_delay,
            log_level=args.log_level or env_config.log_level,
        )
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(config.log_level)
    logger.info("Starting with %s", config)

    game_engine = create_game_engine(config)
    ui = create_ui(config.ui, game_engine)
    ui.run()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="py_tic_tac_toe_solo", description="Tic-tac-toe against the computer.")
    parser.add_argument("--ui", choices=UI_CHOICES)
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty])
    parser.add_argument("--delay", type=float, help="seconds the computer waits before replying")
    parser.add_argument("--log-level", choices=LOG_LEVELS)
    return parser


if __name__ == "__main__":
    main()
