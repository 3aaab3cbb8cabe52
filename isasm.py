# isasm.py v1.2
"""
ISASM - data-driven assembler for machines described by a JSON ISA spec.
Main application entry point.

v1.1: ISA load failures are reported as failure records instead of a traceback.
v1.2: Add --interactive mode (prompt for source files until an empty name).
"""

import argparse
import sys
import traceback
from typing import List, Optional

from errors import AssemblerResult, SchemaError
from isa_model import IsaModel, load_isa_file
from operand_encoder import ENCODING_REFERENCE, ENCODINGS
from output_generator import write_binary_file, DEFAULT_BINARY_FILENAME
from pass_logic import assemble

DEFAULT_ISA_FILENAME = "AnPUNano.json"
VERSION = "0.1.2"


class Assembler:
    """ Ties the ISA file, one source file and the binary output together. """
    def __init__(self, input_filename: str, isa_filename: str = DEFAULT_ISA_FILENAME,
                 binary_filename: Optional[str] = None, encoding: str = ENCODING_REFERENCE,
                 strict_width: bool = False, debug_mode: bool = False):
        self.input_filename = input_filename
        self.isa_filename = isa_filename
        self.binary_filename = binary_filename if binary_filename else DEFAULT_BINARY_FILENAME
        self.encoding = encoding
        self.strict_width = strict_width
        self.debug_mode = debug_mode
        self.isa: Optional[IsaModel] = None
        self.result = AssemblerResult()

    def assemble(self) -> bool:
        """ Loads the ISA, encodes the source and writes the words if the run is clean. """
        if self.debug_mode: print(f"Debug: Loading ISA from '{self.isa_filename}'")
        try:
            self.isa = load_isa_file(self.isa_filename, strict_width=self.strict_width, debug_mode=self.debug_mode)
        except SchemaError as e:
            self.result.record_failure(self.isa_filename, None, f"Invalid .json ISA specification - {e.message}")
            return False

        source_text = self._read_input_file()
        if source_text is None: return False

        assemble(self.isa, source_text, source_file=self.input_filename,
                 encoding=self.encoding, debug_mode=self.debug_mode, result=self.result)
        if not self.result.is_clean(): return False

        try:
            count = write_binary_file(self.binary_filename, self.result.binary_words(), debug_mode=self.debug_mode)
        except OSError as e:
            self.result.record_failure(self.binary_filename, None, f"Cannot write binary file: {e.strerror or e}")
            return False
        self.result.record_info(f"Wrote {count} word(s) to '{self.binary_filename}'")
        return True

    def _read_input_file(self) -> Optional[str]:
        try:
            with open(self.input_filename, 'r', encoding='utf-8') as f: return f.read()
        except FileNotFoundError: self.result.record_failure(self.input_filename, None, "Input file not found")
        except (OSError, UnicodeDecodeError) as e: self.result.record_failure(self.input_filename, None, f"Error reading input file: {e}")
        return None


def run_once(args, input_filename: str) -> int:
    assembler = Assembler(
        input_filename=input_filename,
        isa_filename=args.isa,
        binary_filename=args.output,
        encoding=args.encoding,
        strict_width=args.strict_width,
        debug_mode=args.debug
    )
    ok = assembler.assemble()
    assembler.result.report()
    return 0 if ok else 1

def run_interactive(args, prompt=input) -> int:
    """ Prompts for source files until an empty name or EOF. Each is an independent run. """
    exit_code = 0
    while True:
        try:
            name = prompt("Source file (empty to quit): ").strip()
        except EOFError:
            break
        if not name:
            break
        exit_code = run_once(args, name)
    return exit_code

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"ISASM data-driven assembler v{VERSION}")
    parser.add_argument("input_file", nargs="?", help="Assembly source file to assemble.")
    parser.add_argument("-i", "--isa", default=DEFAULT_ISA_FILENAME, help=f"JSON ISA specification (defaults to '{DEFAULT_ISA_FILENAME}').")
    parser.add_argument("-o", "--output", help=f"Output binary file name (defaults to '{DEFAULT_BINARY_FILENAME}').")
    parser.add_argument("--encoding", choices=ENCODINGS, default=ENCODING_REFERENCE, help="Operand encoding rules.")
    parser.add_argument("--strict-width", action="store_true", help="Reject instructions whose width differs from instruction_length.")
    parser.add_argument("--interactive", action="store_true", help="Prompt for source files repeatedly.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug mode.")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.interactive and not args.input_file:
        parser.error("input_file is required unless --interactive is given")

    try:
        if args.interactive: return run_interactive(args)
        return run_once(args, args.input_file)
    except Exception as e:
        print(f"CRITICAL UNHANDLED ERROR: {e}", file=sys.stderr); traceback.print_exc()
        return 1

if __name__ == "__main__":
    sys.exit(main())

# isasm.py v1.2
