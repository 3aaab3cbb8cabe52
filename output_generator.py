# output_generator.py v1.1
"""
Writes assembled binary words for ISASM, one word per line.
"""
from typing import Iterable

DEFAULT_BINARY_FILENAME = "binfile.txt"


class OutputGenerator:
    def __init__(self, binary_file_handle):
        self.binary_file = binary_file_handle
        self.words_written = 0
        self.debug_mode = False

    def write_word(self, word: str):
        if not word or set(word) - {'0', '1'}:
            raise ValueError(f"Not a binary word: '{word}'")
        self.binary_file.write(f"{word}\n")
        self.words_written += 1
        if self.debug_mode: print(f"Debug: wrote word {self.words_written}: {word}")

    def write_words(self, words: Iterable[str]) -> int:
        for word in words:
            self.write_word(word)
        return self.words_written


def write_binary_file(file_name: str, words: Iterable[str], debug_mode: bool = False) -> int:
    """Writes words to file_name and returns how many were written."""
    with open(file_name, 'w') as f:
        generator = OutputGenerator(f)
        generator.debug_mode = debug_mode
        return generator.write_words(words)

# output_generator.py v1.1
