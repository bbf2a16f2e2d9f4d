"""Defines `LogGetter` class."""

import logging
from typing import Any, Dict, Tuple


class LogGetter:
    """\
    Proxy to `logging.Logger` instance that defers lookup until use, and
    accepts keyword data on the level methods:

        LOG = get_logger(__name__)
        LOG.debug("Rendered template", url=url)

    Keyword data lands on the record as `record.data`, where `RichHandler`
    prints it as a table.
    """

    name: str

    def __init__(self, *name: str):
        self.name = ".".join(name)

    @property
    def _logger(self) -> logging.Logger:
        return logging.getLogger(self.name)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._logger, name)

    def __repr__(self) -> str:
        return f"<LogGetter {self.name}>"

    def getChild(self, name: str) -> "LogGetter":
        return LogGetter(self.name, name)

    def _log(
        self,
        level: int,
        msg: Any,
        args: Tuple[Any, ...],
        *,
        exc_info=None,
        stack_info: bool = False,
        extra: Dict[str, Any] = None,
        **data: Any,
    ) -> None:
        logger = self._logger
        if not logger.isEnabledFor(level):
            return
        if extra is None:
            extra = {"data": data}
        else:
            extra = {"data": data, **extra}
        # Point `funcName` / `lineno` at our caller, not at this proxy
        logger.log(
            level,
            msg,
            *args,
            exc_info=exc_info,
            stack_info=stack_info,
            extra=extra,
            stacklevel=3,
        )

    def debug(self, msg, *args, **kwds) -> None:
        self._log(logging.DEBUG, msg, args, **kwds)

    def info(self, msg, *args, **kwds) -> None:
        self._log(logging.INFO, msg, args, **kwds)

    def warning(self, msg, *args, **kwds) -> None:
        self._log(logging.WARNING, msg, args, **kwds)

    def error(self, msg, *args, **kwds) -> None:
        self._log(logging.ERROR, msg, args, **kwds)

    def critical(self, msg, *args, **kwds) -> None:
        self._log(logging.CRITICAL, msg, args, **kwds)

    def exception(self, msg, *args, exc_info=True, **kwds) -> None:
        self._log(logging.ERROR, msg, args, exc_info=exc_info, **kwds)
