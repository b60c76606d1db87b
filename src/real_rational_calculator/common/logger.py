"""Package-wide logger configuration."""
import logging
from typing import Union

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("real_rational_calculator")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.WARNING)


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the level of the package logger.

    :param level: Level name (e.g. "DEBUG") or numeric logging level
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
