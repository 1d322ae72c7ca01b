"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import re

from opsuccess import formats, ranges


def test_lines():
    assert formats.enumLine(80) == (
        "  kOpSuccess80 = 0x50,      //!< kOpSuccess80 (BIP-342)"
    )
    assert formats.enumLine(251) == (
        "  kOpSuccess251 = 0xfb,      //!< kOpSuccess251 (BIP-342)"
    )
    assert formats.declarationLine(98) == (
        "static const ScriptOperator OP_SUCCESS98;   //!< OP_SUCCESS98 (BIP-342)"
    )
    assert formats.definitionLine(254) == (
        "const ScriptOperator ScriptOperator::OP_SUCCESS254"
        '(kOpSuccess254, "OP_SUCCESS254");'
    )


def test_singleAndRange():
    seq = ranges.buildSequence([5], [(7, 7)])
    assert formats.dumpScriptType(seq) == [
        "  kOpSuccess5 = 0x5,      //!< kOpSuccess5 (BIP-342)",
        "  kOpSuccess7 = 0x7,      //!< kOpSuccess7 (BIP-342)",
    ]
    assert formats.dumpScriptOperatorDefine(seq) == [
        "static const ScriptOperator OP_SUCCESS5;   //!< OP_SUCCESS5 (BIP-342)",
        "static const ScriptOperator OP_SUCCESS7;   //!< OP_SUCCESS7 (BIP-342)",
    ]
    assert formats.dumpScriptOperatorImpl(seq) == [
        'const ScriptOperator ScriptOperator::OP_SUCCESS5(kOpSuccess5, "OP_SUCCESS5");',
        'const ScriptOperator ScriptOperator::OP_SUCCESS7(kOpSuccess7, "OP_SUCCESS7");',
    ]


def test_valuesReparse():
    enumRE = re.compile(r"^  kOpSuccess(\d+) = 0x([0-9a-f]+),      //!< kOpSuccess(\d+) ")
    declRE = re.compile(r"OP_SUCCESS(\d+);   //!< OP_SUCCESS(\d+) ")
    implRE = re.compile(r'::OP_SUCCESS(\d+)\(kOpSuccess(\d+), "OP_SUCCESS(\d+)"\);$')
    for op in ranges.buildSequence():
        m = enumRE.match(formats.enumLine(op))
        assert int(m.group(1)) == op
        assert int(m.group(2), 16) == op
        assert int(m.group(3)) == op
        m = declRE.search(formats.declarationLine(op))
        assert {int(g) for g in m.groups()} == {op}
        m = implRE.search(formats.definitionLine(op))
        assert {int(g) for g in m.groups()} == {op}


def test_render():
    seq = ranges.buildSequence()
    lines = formats.render(seq)
    assert len(lines) == 261
    assert lines[:87] == formats.dumpScriptType(seq)
    assert lines[87:174] == formats.dumpScriptOperatorDefine(seq)
    assert lines[174:] == formats.dumpScriptOperatorImpl(seq)
    assert lines[0].startswith("  kOpSuccess80 = 0x50,")
    assert lines[86].startswith("  kOpSuccess254 = 0xfe,")
    assert lines[87].startswith("static const ScriptOperator OP_SUCCESS80;")
    assert lines[174].startswith("const ScriptOperator ScriptOperator::OP_SUCCESS80(")

    # A generator is consumed once.
    assert formats.render(iter([5, 7])) == formats.render([5, 7])
    assert formats.render([]) == []
