"""
Copyright (c) 2020, the Decred developers
See LICENSE for details

Line templates for the C++ ScriptType enum and the ScriptOperator class
members. Every function here is pure.
"""

from typing import Iterable, List

from opsuccess import helpers


log = helpers.getLogger("FORMATS")

BIP = "BIP-342"


def enumLine(op: int) -> str:
    """
    An enumerator of the ScriptType enum, e.g.
    `  kOpSuccess80 = 0x50,      //!< kOpSuccess80 (BIP-342)`.
    """
    return f"  kOpSuccess{op} = 0x{op:x},      //!< kOpSuccess{op} ({BIP})"


def declarationLine(op: int) -> str:
    """
    A static member declaration for the ScriptOperator class body.
    """
    return (
        f"static const ScriptOperator OP_SUCCESS{op};"
        f"   //!< OP_SUCCESS{op} ({BIP})"
    )


def definitionLine(op: int) -> str:
    """
    The out-of-class definition matching declarationLine.
    """
    return (
        f"const ScriptOperator ScriptOperator::OP_SUCCESS{op}"
        f'(kOpSuccess{op}, "OP_SUCCESS{op}");'
    )


def dumpScriptType(ops: Iterable[int]) -> List[str]:
    return [enumLine(op) for op in ops]


def dumpScriptOperatorDefine(ops: Iterable[int]) -> List[str]:
    return [declarationLine(op) for op in ops]


def dumpScriptOperatorImpl(ops: Iterable[int]) -> List[str]:
    return [definitionLine(op) for op in ops]


def render(ops: Iterable[int]) -> List[str]:
    """
    All three groups in output order: enumerators, declarations, definitions.

    Args:
        ops (iterable(int)): The opcode list.

    Returns:
        list(str): The lines, without line terminators.
    """
    ops = list(ops)
    lines = dumpScriptType(ops)
    lines += dumpScriptOperatorDefine(ops)
    lines += dumpScriptOperatorImpl(ops)
    log.debug(f"rendered {len(lines)} lines for {len(ops)} opcodes")
    return lines
