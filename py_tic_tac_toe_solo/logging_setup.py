import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    # stderr keeps log lines out of the terminal UI's board output.
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(stream_handler)
