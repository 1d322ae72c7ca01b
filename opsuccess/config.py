"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, the Decred developers
See LICENSE for details

Command-line configuration for the OP_SUCCESS generator.
"""

import argparse
import logging
import sys

from opsuccess import OpSuccessError


logLevelMap = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "notset": logging.NOTSET,
    "0": logging.NOTSET,
}


def logLvl(s):
    """
    Get the log level from the map.

    Args:
        s (str): A string which is a key for the logLevelMap. Case-insensitive.

    Raises:
        OpSuccessError: The level name is not recognized.
    """
    try:
        return logLevelMap[s.lower()]
    except KeyError:
        raise OpSuccessError(f"unknown log level {s!r}")


class CmdArgs:
    """
    CmdArgs are command-line configuration options. Only logging can be
    configured. The generated output is fixed.
    """

    def __init__(self):
        self.logLevel = logging.WARNING
        self.moduleLevels = {}
        parser = argparse.ArgumentParser(
            description="Print the BIP-342 OP_SUCCESS opcode definitions."
        )
        parser.add_argument(
            "--loglevel", help="LEVEL or MODULE:LEVEL,MODULE:LEVEL,... (stderr)"
        )
        args, unknown = parser.parse_known_args()
        if unknown:
            sys.exit(f"unknown arguments: {unknown}")
        if args.loglevel:
            try:
                if any(ch in args.loglevel for ch in (",", ":")):
                    pairs = (s.split(":") for s in args.loglevel.split(","))
                    self.moduleLevels = {k: logLvl(v) for k, v in pairs}
                else:
                    self.logLevel = logLvl(args.loglevel)
            except Exception:
                sys.exit(f"malformed loglevel specifier: {args.loglevel}")
