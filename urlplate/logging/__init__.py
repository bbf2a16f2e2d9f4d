"""
Logging for `urlplate`.

The library only ever logs at `DEBUG`, under the `urlplate` logger. Nothing is
printed until an application calls `setup` (or `setup_from_env`), which hangs
a `RichHandler` off that logger and sets its level.
"""

# pylint: disable=global-statement

from __future__ import annotations
import logging
import os
from typing import Mapping, Optional, Union

from .log_getter import LogGetter
from .rich_handler import RichHandler

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

DEFAULT_LEVEL = WARNING

# Read by `setup_from_env`
LEVEL_ENV_VAR = "URLPLATE_LOG_LEVEL"

LEVELS = {
    logging.getLevelName(level): level
    for level in (DEBUG, INFO, WARNING, ERROR, CRITICAL)
}

PKG_LOGGER_NAME = __name__.split(".")[0]

_is_setup: bool = False


def level_for(value: Union[int, str]) -> int:
    """
    Level `int` from an `int`, a digit string or a level name (any case), as
    found in `URLPLATE_LOG_LEVEL`.

    >>> level_for("debug"), level_for("20"), level_for(logging.ERROR)
    (10, 20, 40)

    >>> level_for("loud")
    Traceback (most recent call last):
        ...
    ValueError: Unknown log level 'loud'; use one of DEBUG, INFO, WARNING, ERROR, CRITICAL or their numbers
    """
    if isinstance(value, str):
        name = value.strip().upper()
        if name.isdigit():
            return level_for(int(name))
        if name in LEVELS:
            return LEVELS[name]
    elif isinstance(value, int) and not isinstance(value, bool):
        if value in LEVELS.values():
            return value
    else:
        raise TypeError(
            "Expected `value` to be str or int, "
            f"given {type(value)}: {repr(value)}"
        )
    raise ValueError(
        f"Unknown log level {repr(value)}; use one of "
        f"{', '.join(LEVELS)} or their numbers"
    )


def get_logger(*name: str) -> LogGetter:
    return LogGetter(*name)


def set_level(level: Optional[Union[int, str]] = None) -> None:
    if level is None:
        return
    logger = get_logger(PKG_LOGGER_NAME)
    logger.setLevel(level_for(level))
    logger.debug("Log level set", level=logging.getLevelName(logger.level))


def setup(level: Union[int, str] = DEFAULT_LEVEL) -> None:
    global _is_setup

    if not _is_setup:
        get_logger(PKG_LOGGER_NAME).addHandler(RichHandler.singleton())
        _is_setup = True

    set_level(level)


def setup_from_env(env: Mapping[str, str] = os.environ) -> None:
    """`setup` at `URLPLATE_LOG_LEVEL`, or `DEFAULT_LEVEL` if unset or blank."""
    setup(env.get(LEVEL_ENV_VAR, "").strip() or DEFAULT_LEVEL)
