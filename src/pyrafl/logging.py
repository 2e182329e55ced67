from __future__ import annotations

import logging
import logging.config
from logging import LogRecord
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class AppFilter(logging.Filter):
    """
    Attach the stem of the emitting file to each record as ``filenameStem``.
    """

    def filter(self, record: LogRecord) -> bool:
        record.filenameStem = Path(record.filename).stem
        return True


def rich_handler_factory() -> RichHandler:
    return RichHandler(
        console=Console(width=160, stderr=True),
        rich_tracebacks=True,
        markup=True,
    )


def logging_config(level: str = "INFO") -> dict[str, Any]:
    """
    Build the logging configuration dictionary.

    The root logger only lets warnings through; the ``pyrafl`` loggers report
    at ``level`` through the rich handler.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "appfilter": {
                "()": AppFilter,
            }
        },
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            },
            "pretty": {"format": "[[yellow]%(filenameStem)s[/]] %(message)s"},
        },
        "handlers": {
            "default": {
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "rich": {
                "()": rich_handler_factory,
                "formatter": "pretty",
                "filters": ["appfilter"],
            },
        },
        "loggers": {
            "": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
            "pyrafl": {
                "handlers": ["rich"],
                "level": level,
                "propagate": False,
            },
        },
    }


def setup(level: str = "INFO") -> None:
    """
    Initialize logging, reporting pyrafl messages at ``level`` and above.
    """
    logging.config.dictConfig(logging_config(level))


__all__ = ("logging_config", "setup")
