# operand_encoder.py v1.3
"""
Encodes operand tokens into fixed-width bit fields using the operand
templates of the instruction table.

A template's length is the field width in bits; a leading '-' marks the
field as signed.

Two encodings are supported:
  reference - unsigned fields are always all-zero bits; signed fields are
              the plain binary rendering of the value, zero-padded.
  strict    - unsigned fields are the value in binary, range checked;
              signed fields are two's complement, range checked.

v1.1: Reject values whose reference rendering is wider than the field.
v1.2: Added the strict encoding.
v1.3: Over-long digit strings are an OperandRangeError, not a crash.
"""
import re
from typing import Tuple

from errors import OperandParseError, OperandRangeError

ENCODING_REFERENCE = 'reference'
ENCODING_STRICT = 'strict'
ENCODINGS = (ENCODING_REFERENCE, ENCODING_STRICT)

# Plain base-10 integer with optional sign
INT_CONST_REGEX = re.compile(r'^[+-]?[0-9]+$')
# Default int() digit limit of Python 3.11+
MAX_OPERAND_DIGITS = 4300


def parse_operand(token: str) -> int:
    """Parses a base-10 integer token. Raises OperandParseError."""
    if token is None or not INT_CONST_REGEX.fullmatch(token):
        raise OperandParseError(f"Invalid operand '{token}': expected a base-10 integer")
    too_large = f"Operand of {len(token)} characters is too large for any field"
    if len(token.lstrip("+-")) > MAX_OPERAND_DIGITS:
        raise OperandRangeError(too_large)
    try:
        return int(token, 10)
    except ValueError:
        # sys.set_int_max_str_digits may be set lower
        raise OperandRangeError(too_large)

def is_signed_template(template: str) -> bool:
    return template.startswith('-')

def template_range(template: str) -> Tuple[int, int]:
    """Inclusive (min, max) value accepted by a template under the strict encoding."""
    width = len(template)
    if is_signed_template(template):
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    return 0, (1 << width) - 1


def _encode_reference(value: int, template: str) -> str:
    width = len(template)
    if not is_signed_template(template):
        return '0' * width
    if value < 0:
        raise OperandRangeError(f"Negative value {value} cannot be rendered in reference encoding for field '{template}'")
    bits = format(value, 'b')
    if len(bits) > width:
        raise OperandRangeError(f"Value {value} does not fit in {width}-bit field '{template}'")
    return bits.zfill(width)

def _encode_strict(value: int, template: str) -> str:
    width = len(template)
    low, high = template_range(template)
    if not low <= value <= high:
        kind = "signed" if is_signed_template(template) else "unsigned"
        raise OperandRangeError(f"Value {value} out of range for {width}-bit {kind} field ({low}..{high})")
    mask = (1 << width) - 1
    return format(value & mask, f'0{width}b')


def encode_operand(token: str, template: str, encoding: str = ENCODING_REFERENCE) -> str:
    """
    Returns the bit field for one operand token, exactly len(template) characters.
    Raises OperandParseError (or its subclass OperandRangeError).
    """
    if not template:
        raise ValueError("Operand template must not be empty")
    value = parse_operand(token)
    if encoding == ENCODING_REFERENCE:
        return _encode_reference(value, template)
    if encoding == ENCODING_STRICT:
        return _encode_strict(value, template)
    raise ValueError(f"Unknown operand encoding '{encoding}' (expected one of {', '.join(ENCODINGS)})")

# operand_encoder.py v1.3
