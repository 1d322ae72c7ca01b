"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

The table of opcodes reserved as OP_SUCCESSx by BIP-342, and the code that
flattens it into an ordered opcode list.
"""

from collections import Counter
from functools import reduce
from typing import Iterable, List, Sequence, Tuple

from opsuccess import helpers


log = helpers.getLogger("RANGES")

# The largest value a single-byte opcode can take.
MaxOpcode = 0xFF

# Opcodes that are not part of a contiguous block.
DEFAULT_SINGLES = (80, 98)

# Inclusive (start, end) blocks, appended in this order after the singles.
DEFAULT_RANGES = (
    (126, 129),
    (131, 134),
    (137, 138),
    (141, 142),
    (149, 153),
    (187, 254),
)


def addRange(seq: Sequence[int], start: int, end: int) -> List[int]:
    """
    Append every integer from start to end, inclusive, to the sequence. The
    input is not modified. If start > end, the result is a copy of seq.

    Args:
        seq: The opcodes collected so far.
        start: The first opcode of the block.
        end: The last opcode of the block.

    Returns:
        A new list with the block appended.
    """
    return list(seq) + list(range(start, end + 1))


def buildSequence(
    singles: Iterable[int] = DEFAULT_SINGLES,
    ranges: Iterable[Tuple[int, int]] = DEFAULT_RANGES,
) -> List[int]:
    """
    Assemble the opcode list. The singles come first, followed by each range
    in the order given. The result is neither sorted nor deduplicated.

    Args:
        singles: Opcodes listed individually.
        ranges: Inclusive (start, end) pairs.

    Returns:
        The ordered opcode list.
    """
    seq = reduce(lambda acc, r: addRange(acc, *r), ranges, list(singles))
    log.debug(f"assembled {len(seq)} opcodes")
    return seq


def checkRanges(
    singles: Iterable[int] = DEFAULT_SINGLES,
    ranges: Iterable[Tuple[int, int]] = DEFAULT_RANGES,
) -> List[str]:
    """
    Look for problems in an opcode table without changing what it generates.
    Empty ranges, opcodes outside of a byte, and opcodes that would be
    generated more than once are each logged as a warning.

    Args:
        singles: Opcodes listed individually.
        ranges: Inclusive (start, end) pairs.

    Returns:
        list(str): A description of each problem found.
    """
    singles = list(singles)
    ranges = list(ranges)
    problems = []
    for start, end in ranges:
        if start > end:
            problems.append(f"range [{start},{end}] is empty")
    seq = buildSequence(singles, ranges)
    for op in seq:
        if op < 0 or op > MaxOpcode:
            problems.append(f"opcode {op} is not a single byte")
    dupes = sorted(op for op, n in Counter(seq).items() if n > 1)
    for op in dupes:
        problems.append(f"opcode {op} is listed more than once")
    for problem in problems:
        log.warning(problem)
    return problems
