import io

import pytest

from output_generator import OutputGenerator, write_binary_file


def test_write_words_one_per_line():
    buf = io.StringIO()
    gen = OutputGenerator(buf)
    assert gen.write_words(["0001", "1110"]) == 2
    assert buf.getvalue() == "0001\n1110\n"

@pytest.mark.parametrize("word", ["", "0102", "abc"])
def test_rejects_non_binary_words(word):
    with pytest.raises(ValueError):
        OutputGenerator(io.StringIO()).write_word(word)

def test_write_binary_file(tmp_path):
    path = tmp_path / "out.txt"
    assert write_binary_file(str(path), ["00010000"]) == 1
    assert path.read_text() == "00010000\n"
