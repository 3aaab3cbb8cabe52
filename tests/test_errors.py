import io

from errors import (
    AssemblerResult, AsmException, SchemaError, OperandParseError, OperandRangeError,
    UnknownMnemonicError, format_failure,
)


def test_exception_str_includes_line():
    assert str(UnknownMnemonicError("Unknown mnemonic 'X'", 4)) == "L4: Unknown mnemonic 'X'"
    assert str(SchemaError("bad")) == "bad"

def test_exception_hierarchy():
    assert issubclass(OperandRangeError, OperandParseError)
    assert issubclass(OperandParseError, ValueError)
    assert issubclass(SchemaError, AsmException)

def test_failure_format():
    assert format_failure({'file': 'a.asm', 'line': 2, 'message': 'm'}) == 'File "a.asm", line 2: m'
    assert format_failure({'file': 'isa.json', 'line': None, 'message': 'm'}) == 'File "isa.json": m'

def test_clean_result_emits_info_in_order():
    result = AssemblerResult()
    result.record_info("one")
    result.record_info("two")
    assert result.is_clean()
    assert result.emit() == ["one", "two"]

def test_any_failure_hides_all_info():
    result = AssemblerResult()
    for i in range(5):
        result.record_info(f"info {i}")
    result.record_failure("a.asm", 3, "first")
    result.record_info("late info")
    result.record_failure("a.asm", None, "second")
    assert not result.is_clean()
    assert result.emit() == ['File "a.asm", line 3: first', 'File "a.asm": second']

def test_record_exception_uses_its_line():
    result = AssemblerResult()
    result.record_exception("a.asm", UnknownMnemonicError("Missing mnemonic", 9))
    assert result.fails == [{'file': 'a.asm', 'line': 9, 'message': 'Missing mnemonic'}]

def test_binary_words_only_when_clean():
    result = AssemblerResult()
    result.record_word(1, "0101")
    assert result.binary_words() == ["0101"]
    result.record_failure("a.asm", 2, "bad")
    assert result.binary_words() == []

def test_report_prints_emitted_lines():
    result = AssemblerResult()
    result.record_info("hello")
    out = io.StringIO()
    result.report(file=out)
    assert out.getvalue() == "hello\n"
