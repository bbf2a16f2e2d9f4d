from __future__ import annotations
import logging
import sys
from typing import *

from rich.console import Console, Group
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text
from rich.traceback import Traceback


class RichHandler(logging.Handler):
    """
    Prints records as a header line (level and logger name), the message,
    then any keyword data from `LogGetter` as an aligned key/value grid.

    Records go to the `err` console unless `level_map` sends their level
    somewhere else.
    """

    @classmethod
    def singleton(cls) -> RichHandler:
        if (instance := cls.__dict__.get("_singleton")) is None:
            instance = cls()
            cls._singleton = instance
        return instance

    def __init__(
        self,
        level: int = logging.NOTSET,
        *,
        consoles: Optional[Mapping[str, Console]] = None,
        level_map: Optional[Mapping[int, str]] = None,
    ):
        super().__init__(level=level)
        self.consoles = {
            "out": Console(file=sys.stdout),
            "err": Console(file=sys.stderr),
            **(consoles or {}),
        }
        self.level_map = dict(level_map or {})

    def console_for(self, record: logging.LogRecord) -> Console:
        return self.consoles[self.level_map.get(record.levelno, "err")]

    def emit(self, record):
        try:
            self.console_for(record).print(self.render_record(record))
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            self.handleError(record)

    def render_record(self, record: logging.LogRecord) -> Group:
        header = Text.assemble(
            (
                f"{record.levelname:<8}",
                f"logging.level.{record.levelname.lower()}",
            ),
            " ",
            (record.name, "dim blue"),
        )
        parts = [header, Text(record.getMessage(), style="log.message")]

        if data := getattr(record, "data", None):
            grid = Table.grid(padding=(0, 1))
            grid.add_column(style="italic blue")
            grid.add_column()
            for key, value in data.items():
                grid.add_row(key, Pretty(value))
            parts.append(grid)

        if record.exc_info:
            parts.append(Traceback.from_exception(*record.exc_info))

        return Group(*parts)
