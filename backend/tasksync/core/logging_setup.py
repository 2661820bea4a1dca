import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "tasksync"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``tasksync`` logger tree:
    - console handler on stderr
    - optional file handler with the same format

    Safe to call more than once (each app startup calls it); handlers added
    by a previous call are replaced, handlers owned by others are left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for h in list(logger.handlers):
        if getattr(h, "_tasksync", False):
            logger.removeHandler(h)
            h.close()

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch._tasksync = True
    logger.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setFormatter(fmt)
        fh._tasksync = True
        logger.addHandler(fh)

    return logger
