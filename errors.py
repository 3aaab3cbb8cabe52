# errors.py v1.3
"""
Error reporting classes for the ISASM assembler.
Includes custom Exception classes and the AssemblerResult collector.

v1.1: Split per-line errors into UnknownMnemonicError / OperandArityError.
v1.2: Added OperandRangeError for values that do not fit their field.
v1.3: AssemblerResult keeps the encoded words next to the diagnostics.
"""

import sys
from typing import List, Optional, Tuple, Dict, Any

# --- Custom Exceptions ---

class AsmException(Exception):
    """Base class for assembler errors."""
    def __init__(self, message, line_num=None):
        super().__init__(message)
        self.message = message
        self.line_num = line_num

    def __str__(self):
        prefix = f"L{self.line_num}: " if self.line_num else ""
        return f"{prefix}{self.message}"

class SchemaError(AsmException):
    """Malformed or incomplete ISA description. Fatal to the run."""
    pass

class UnknownMnemonicError(AsmException):
    """First token of a line is missing or not in the instruction table."""
    pass

class OperandArityError(AsmException):
    """Operand token count differs from the instruction's template count."""
    pass

class OperandParseError(AsmException, ValueError):
    """Operand token is not a valid base-10 integer."""
    pass

class OperandRangeError(OperandParseError):
    """Operand value cannot be represented in its field."""
    pass


def format_failure(failure: Dict[str, Any]) -> str:
    if failure['line'] is not None:
        return f"File \"{failure['file']}\", line {failure['line']}: {failure['message']}"
    return f"File \"{failure['file']}\": {failure['message']}"


# --- Diagnostics Collector ---

class AssemblerResult:
    """
    Collects info lines, failures and encoded words for one assembly run.
    Info lines are only visible while no failure has been recorded.
    """
    def __init__(self):
        self.successes: List[str] = []
        self.fails: List[Dict[str, Any]] = []
        self.words: List[Tuple[int, str]] = []

    def record_info(self, text: str):
        self.successes.append(text)

    def record_failure(self, file: str, line: Optional[int], message: str):
        self.fails.append({'file': file, 'line': line, 'message': message})

    def record_exception(self, file: str, exc: AsmException):
        """Records an AsmException as a failure at its own line number."""
        self.record_failure(file, exc.line_num, exc.message)

    def record_word(self, line_num: int, word: str):
        self.words.append((line_num, word))

    def is_clean(self) -> bool:
        return not self.fails

    def binary_words(self) -> List[str]:
        """Encoded words in source order, or nothing if the run failed."""
        if not self.is_clean():
            return []
        return [word for _, word in self.words]

    def emit(self) -> List[str]:
        if self.is_clean():
            return list(self.successes)
        return [format_failure(f) for f in self.fails]

    def report(self, file=None):
        """Prints emit() output, one record per line."""
        out = file if file is not None else sys.stdout
        for line in self.emit():
            print(line, file=out)

# errors.py v1.3
