"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Prints the BIP-342 OP_SUCCESS members of the C++ ScriptType enum and
ScriptOperator class. Redirect stdout into the target sources.
"""

import sys

from opsuccess import formats, helpers
from opsuccess.config import CmdArgs
from opsuccess.ranges import (
    DEFAULT_RANGES,
    DEFAULT_SINGLES,
    buildSequence,
    checkRanges,
)


log = helpers.getLogger("GENERATOR")


def generate(out, singles=DEFAULT_SINGLES, ranges=DEFAULT_RANGES):
    """
    Write the enumerators, declarations and definitions to a text stream.

    Args:
        out (TextIO): The destination stream.
        singles (iterable(int)): Opcodes listed individually.
        ranges (iterable(tuple(int, int))): Inclusive opcode blocks.

    Returns:
        int: The number of lines written.
    """
    seq = buildSequence(singles, ranges)
    lines = formats.render(seq)
    for line in lines:
        out.write(line + "\n")
    out.flush()
    log.info(f"wrote {len(lines)} lines for {len(seq)} opcodes")
    return len(lines)


def main():
    cfg = CmdArgs()
    helpers.prepareLogging(logLvl=cfg.logLevel, lvlMap=cfg.moduleLevels)
    checkRanges()
    try:
        generate(sys.stdout)
    except BrokenPipeError as e:
        log.error(f"output closed early: {e}")
        log.debug(helpers.formatTraceback(e))
        sys.exit(1)
