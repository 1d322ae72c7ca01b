"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Decred developers
See LICENSE for details

Logging for the generator. Log records go to stderr, never to stdout, since
stdout carries the generated source.
"""

import logging
from logging import Logger
import sys
import traceback
from typing import Dict, Optional


LogFormat = "%(asctime)s %(module)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"


def formatTraceback(err: Exception) -> str:
    """
    Format a traceback for an error so that it can go into logs.

    Args:
        err: The error the traceback is extracted from.

    Returns:
        The __str__() of the error, followed by the standard formatting
            of the traceback on the following lines.
    """
    return "".join(traceback.format_exception(None, err, err.__traceback__))


class LogSettings:
    """
    The default level, the per-logger levels, and the one stderr handler
    installed on the root logger.
    """

    root = logging.getLogger("")
    defaultLevel = logging.WARNING
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}
    handler: Optional[logging.Handler] = None


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    logLvl: int = logging.WARNING, lvlMap: Optional[Dict[str, int]] = None
) -> None:
    """
    Apply levels to every logger handed out by getLogger, now and later, and
    point the root logger at the current sys.stderr. Calling it again replaces
    the stderr handler instead of adding a second one.

    Args:
        logLvl: The level for loggers without an entry in lvlMap.
        lvlMap: Logger name -> level. Merged into the levels already
            registered.
    """
    LogSettings.defaultLevel = logLvl
    LogSettings.moduleLevels.update(lvlMap if lvlMap else {})
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LogFormat))
    if LogSettings.handler:
        LogSettings.root.removeHandler(LogSettings.handler)
    LogSettings.handler = handler
    LogSettings.root.addHandler(handler)


def getLogger(name: str) -> Logger:
    """
    Gets a named logger. If the name has a log level registered with
    prepareLogging, that level will be used, otherwise the default is used.

    Args:
        name: The logger name.
    """
    l = LogSettings.root.getChild(name)
    l.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = l
    return l
