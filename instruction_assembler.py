# instruction_assembler.py v1.3
"""
Handles the assembly of individual instruction lines for ISASM.
Resolves the mnemonic, checks operand arity and concatenates the opcode
with the encoded operand fields.

v1.2: Arity is checked before any template is indexed.
v1.3: Every bad operand on a line is reported; the line then yields no word.
"""

from typing import List, Optional

from errors import AssemblerResult, UnknownMnemonicError, OperandArityError, OperandParseError
from isa_model import IsaModel, Instruction
from operand_encoder import encode_operand, ENCODING_REFERENCE


def resolve_instruction(tokens: List[str], isa: IsaModel, line_num: int) -> Instruction:
    """Returns the instruction named by tokens[0]. Raises UnknownMnemonicError."""
    if not tokens:
        raise UnknownMnemonicError("Missing mnemonic", line_num)
    instr = isa.instruction(tokens[0])
    if instr is None:
        raise UnknownMnemonicError(f"Unknown mnemonic '{tokens[0]}'", line_num)
    return instr

def check_arity(instr: Instruction, operand_tokens: List[str], line_num: int):
    if len(operand_tokens) != instr.arity:
        raise OperandArityError(
            f"'{instr.mnemonic}' expects {instr.arity} operand(s), found {len(operand_tokens)}", line_num)


def assemble_line(
    tokens: List[str],
    isa: IsaModel,
    line_num: int,
    result: AssemblerResult,
    file: str,
    encoding: str = ENCODING_REFERENCE,
    debug_mode: bool = False
) -> Optional[str]:
    """
    Encodes one tokenized line. Failures go to result; the word, if any,
    is recorded in result and returned.
    """
    try:
        instr = resolve_instruction(tokens, isa, line_num)
        operand_tokens = tokens[1:]
        check_arity(instr, operand_tokens, line_num)
    except (UnknownMnemonicError, OperandArityError) as e:
        if debug_mode: print(f"Debug L{line_num}: {e}")
        result.record_exception(file, e)
        return None

    fields = []
    operand_failed = False
    for index, (token, template) in enumerate(zip(operand_tokens, instr.operands), start=1):
        try:
            field = encode_operand(token, template, encoding)
        except OperandParseError as e:
            if debug_mode: print(f"Debug L{line_num}: operand {index} of '{instr.mnemonic}': {e.message}")
            result.record_failure(file, line_num, f"Operand {index} of '{instr.mnemonic}': {e.message}")
            operand_failed = True
            continue
        if debug_mode: print(f"Debug L{line_num}: operand {index} '{token}' template '{template}' -> {field}")
        fields.append(field)

    if operand_failed:
        return None

    word = instr.opcode + ''.join(fields)
    result.record_word(line_num, word)
    return word

# instruction_assembler.py v1.3
