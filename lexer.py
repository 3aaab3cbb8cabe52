# lexer.py v1.2
"""
Provides the line tokenizing functionality for the ISASM assembler.
Tokens are separated by commas and blanks only; tabs stay inside tokens.

v1.2: Trim only Unicode White_Space. str.strip() also drops the
      U+001C..U+001F separators, which are kept as token characters.
"""
import re
from typing import List

TOKEN_SPLIT_REGEX = re.compile(r'[, ]')

# Unicode White_Space property
LINE_TRIM_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
    "\u2028\u2029\u202f\u205f\u3000"
)

def tokenize_line(line: str) -> List[str]:
    """
    Splits one source line into [mnemonic, operand, ...].
    Surrounding whitespace is trimmed first and empty tokens produced by
    consecutive delimiters are dropped. A blank line gives [].
    """
    return [tok for tok in TOKEN_SPLIT_REGEX.split(line.strip(LINE_TRIM_CHARS)) if tok]

def split_source_lines(text: str) -> List[str]:
    """Splits program text on newlines; a trailing newline ends the last line."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]

# lexer.py v1.2
