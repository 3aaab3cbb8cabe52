# pass_logic.py v1.1
"""
Contains the run logic for ISASM: one pass over the program text,
each line encoded independently into the AssemblerResult.
"""
from typing import Optional

from errors import AssemblerResult
from isa_model import IsaModel
from lexer import tokenize_line, split_source_lines
from instruction_assembler import assemble_line
from operand_encoder import ENCODING_REFERENCE, ENCODINGS

DEFAULT_SOURCE_NAME = "<source>"


def assemble(
    isa: IsaModel,
    source_text: str,
    source_file: str = DEFAULT_SOURCE_NAME,
    encoding: str = ENCODING_REFERENCE,
    debug_mode: bool = False,
    result: Optional[AssemblerResult] = None
) -> AssemblerResult:
    """
    Assembles the whole program text against isa.
    Line numbers start at 1. A failing line never stops later lines.
    """
    if encoding not in ENCODINGS:
        raise ValueError(f"Unknown operand encoding '{encoding}'")
    if result is None:
        result = AssemblerResult()

    cpu_label = isa.cpu_name or "unnamed CPU"
    result.record_info(f"Assembling '{source_file}' for {cpu_label} ({isa.instruction_length}-bit words)")

    for i, line in enumerate(split_source_lines(source_text)):
        ln = i + 1
        tokens = tokenize_line(line)
        if debug_mode: print(f"Debug L{ln}: tokens={tokens}")
        word = assemble_line(tokens, isa, ln, result, source_file, encoding=encoding, debug_mode=debug_mode)
        if word is not None:
            result.record_info(f"{ln}: {word}  {line.strip()}")

    if debug_mode:
        print(f"Debug: {len(result.words)} word(s) encoded, {len(result.fails)} failure(s).")
    return result

# pass_logic.py v1.1
