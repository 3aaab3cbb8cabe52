import pytest

from pass_logic import assemble
from operand_encoder import ENCODING_STRICT

PROGRAM = "ADD 5\nLDI 3\nMOV 1, 2\nNOP\n"


def test_clean_run_records_words_and_info(isa):
    result = assemble(isa, PROGRAM, source_file="prog.asm")
    assert result.is_clean()
    assert result.binary_words() == ["00010000", "00110011", "10000000", "00000000"]
    assert [ln for ln, _ in result.words] == [1, 2, 3, 4]
    lines = result.emit()
    assert lines[0] == "Assembling 'prog.asm' for Test CPU (8-bit words)"
    assert lines[1] == "1: 00010000  ADD 5"
    assert len(lines) == 5

def test_strict_run(isa):
    result = assemble(isa, "ADD 5\nMOV 1, 2", encoding=ENCODING_STRICT)
    assert result.binary_words() == ["00010101", "10000110"]

def test_failure_does_not_stop_later_lines(isa):
    result = assemble(isa, "FOOBAR 1, 2\nADD 1\nMOV 1\nLDI 2", source_file="p.asm")
    assert not result.is_clean()
    assert [f["line"] for f in result.fails] == [1, 3]
    assert [ln for ln, _ in result.words] == [2, 4]
    assert result.binary_words() == []

def test_failed_run_suppresses_info(isa):
    result = assemble(isa, "ADD 1\nADD 2\nBAD", source_file="p.asm")
    assert result.emit() == ["File \"p.asm\", line 3: Unknown mnemonic 'BAD'"]

def test_blank_line_is_reported(isa):
    result = assemble(isa, "ADD 1\n\nADD 2\n", source_file="p.asm")
    assert result.emit() == ["File \"p.asm\", line 2: Missing mnemonic"]

def test_empty_source_is_clean(isa):
    result = assemble(isa, "")
    assert result.is_clean()
    assert result.binary_words() == []
    assert len(result.emit()) == 1

def test_runs_are_deterministic(isa):
    text = "ADD 5\nMOV 1\nLDI x\nNOP"
    first = assemble(isa, text, source_file="a.asm")
    second = assemble(isa, text, source_file="a.asm")
    assert first.emit() == second.emit()
    assert first.words == second.words

def test_unknown_encoding_is_rejected(isa):
    with pytest.raises(ValueError):
        assemble(isa, "ADD 1", encoding="hex")

def test_huge_operand_is_recorded_and_run_continues(isa):
    result = assemble(isa, "ADD " + "9" * 5000 + "\nNOP\n", source_file="p.asm")
    assert len(result.fails) == 1
    assert result.fails[0]["line"] == 1
    assert "too large" in result.fails[0]["message"]
    assert result.words == [(2, "00000000")]

def test_operand_parse_failure_keeps_clean_line_words(isa):
    result = assemble(isa, "ADD 1\nLDI abc\nNOP\n", source_file="p.asm")
    assert result.emit() == [
        "File \"p.asm\", line 2: Operand 1 of 'LDI': Invalid operand 'abc': expected a base-10 integer"
    ]
    assert result.words == [(1, "00010000"), (3, "00000000")]
    assert result.binary_words() == []
