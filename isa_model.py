# isa_model.py v1.3
"""
Loads and validates the JSON machine description (ISA spec) for ISASM
and provides read-only lookup of its instruction table.

Expected document shape:
    {
      "cpu_data": {"cpu_name": ..., "instruction_length": N, "program_memory_lines": N},
      "define": {category: {name: value}},
      "instructions": {mnemonic: {"opcode": "0101", "operands": ["000", "-00"], "keywords": []}}
    }

v1.1: Reject duplicate keys in any JSON object instead of keeping the last one.
v1.2: Optional strict_width check against cpu_data.instruction_length.
v1.3: Duplicate keys and JSON syntax errors report their location.
"""

import json
import re
from typing import List, Optional, Dict, Any

from errors import SchemaError

OPCODE_REGEX = re.compile(r'^[01]+$')


class CpuData:
    """Word geometry of the described machine."""
    def __init__(self, cpu_name: Optional[str], instruction_length: int, program_memory_lines: int):
        self.cpu_name = cpu_name
        self.instruction_length = instruction_length
        self.program_memory_lines = program_memory_lines

    def __repr__(self):
        return (f"CpuData(cpu_name={self.cpu_name!r}, instruction_length={self.instruction_length}, "
                f"program_memory_lines={self.program_memory_lines})")


class Instruction:
    """One instruction table entry: opcode prefix plus positional operand templates."""
    def __init__(self, mnemonic: str, opcode: str, operands: List[str], keywords: List[str]):
        self.mnemonic = mnemonic
        self.opcode = opcode
        self.operands = tuple(operands)
        self.keywords = tuple(keywords)

    @property
    def arity(self) -> int:
        return len(self.operands)

    @property
    def width(self) -> int:
        return len(self.opcode) + sum(len(t) for t in self.operands)

    def __repr__(self):
        return f"Instruction({self.mnemonic!r}, opcode={self.opcode!r}, operands={list(self.operands)!r})"


class IsaModel:
    """Validated, immutable machine description."""
    def __init__(self, cpu_data: CpuData, define: Dict[str, Dict[str, str]], instructions: Dict[str, Instruction]):
        self.cpu_data = cpu_data
        self._define = {cat: dict(names) for cat, names in define.items()}
        self._instructions = dict(instructions)

    @property
    def cpu_name(self) -> Optional[str]:
        return self.cpu_data.cpu_name

    @property
    def instruction_length(self) -> int:
        return self.cpu_data.instruction_length

    def instruction(self, mnemonic: Optional[str]) -> Optional[Instruction]:
        """Case-sensitive mnemonic lookup. None when not defined."""
        if mnemonic is None:
            return None
        return self._instructions.get(mnemonic)

    def mnemonics(self) -> List[str]:
        return list(self._instructions.keys())

    def define_value(self, category: str, name: str) -> Optional[str]:
        return self._define.get(category, {}).get(name)


# --- Loading ---

class _JsonObject(dict):
    """dict that remembers keys repeated in its JSON source object."""
    def __init__(self):
        super().__init__()
        self.duplicate_keys: List[str] = []

def _collect_pairs(pairs):
    obj = _JsonObject()
    for key, value in pairs:
        if key in obj:
            obj.duplicate_keys.append(key)
        obj[key] = value
    return obj

def _reject_duplicate_keys(value, path: str):
    """Walks the parsed document; the first repeated key raises SchemaError."""
    if isinstance(value, dict):
        for key in getattr(value, 'duplicate_keys', ()):
            raise SchemaError(f"Duplicate key '{key}' at {path}")
        for key, item in value.items():
            _reject_duplicate_keys(item, key if path == "top level" else f"{path}.{key}")
    elif isinstance(value, list):
        for i, item in enumerate(value):
            _reject_duplicate_keys(item, f"{path}[{i}]")

def _require(obj: Dict[str, Any], key: str, path: str):
    if key not in obj:
        raise SchemaError(f"Missing field '{key}' at {path}")
    return obj[key]

def _expect_object(value, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"Expected an object at {path}, found {type(value).__name__}")
    return value

def _expect_str(value, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"Expected a string at {path}, found {type(value).__name__}")
    return value

def _expect_uint(value, path: str) -> int:
    # bool is an int subclass; JSON true/false is not a length
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaError(f"Expected a non-negative integer at {path}, found {value!r}")
    return value

def _expect_str_list(value, path: str) -> List[str]:
    if not isinstance(value, list):
        raise SchemaError(f"Expected a list at {path}, found {type(value).__name__}")
    return [_expect_str(item, f"{path}[{i}]") for i, item in enumerate(value)]


def _parse_cpu_data(raw) -> CpuData:
    cpu = _expect_object(raw, "cpu_data")
    cpu_name = cpu.get('cpu_name')
    if cpu_name is not None:
        _expect_str(cpu_name, "cpu_data.cpu_name")
    return CpuData(
        cpu_name,
        _expect_uint(_require(cpu, 'instruction_length', "cpu_data"), "cpu_data.instruction_length"),
        _expect_uint(_require(cpu, 'program_memory_lines', "cpu_data"), "cpu_data.program_memory_lines"),
    )

def _parse_define(raw) -> Dict[str, Dict[str, str]]:
    define = {}
    for category, names in _expect_object(raw, "define").items():
        path = f"define.{category}"
        define[category] = {name: _expect_str(value, f"{path}.{name}")
                            for name, value in _expect_object(names, path).items()}
    return define

def _parse_instruction(mnemonic: str, raw) -> Instruction:
    path = f"instructions.{mnemonic}"
    entry = _expect_object(raw, path)
    opcode = _expect_str(_require(entry, 'opcode', path), f"{path}.opcode")
    if not OPCODE_REGEX.match(opcode):
        raise SchemaError(f"Opcode at {path}.opcode must be a non-empty bit string, found '{opcode}'")
    operands = _expect_str_list(_require(entry, 'operands', path), f"{path}.operands")
    for i, template in enumerate(operands):
        if not template:
            raise SchemaError(f"Empty operand template at {path}.operands[{i}]")
    keywords = _expect_str_list(_require(entry, 'keywords', path), f"{path}.keywords")
    return Instruction(mnemonic, opcode, operands, keywords)


def load_isa(raw, strict_width: bool = False, debug_mode: bool = False) -> IsaModel:
    """
    Builds an IsaModel from a serialized JSON description (str or UTF-8 bytes).
    Raises SchemaError on any malformed, missing or duplicated field.
    With strict_width, every instruction must encode to exactly
    cpu_data.instruction_length bits.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise SchemaError(f"ISA specification is not valid UTF-8: {e}")
    try:
        doc = json.loads(raw, object_pairs_hook=_collect_pairs)
    except json.JSONDecodeError as e:
        raise SchemaError(f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}")
    _reject_duplicate_keys(doc, "top level")

    doc = _expect_object(doc, "top level")
    cpu_data = _parse_cpu_data(_require(doc, 'cpu_data', "top level"))
    define = _parse_define(_require(doc, 'define', "top level"))
    instructions = {mnemonic: _parse_instruction(mnemonic, entry)
                    for mnemonic, entry in _expect_object(_require(doc, 'instructions', "top level"), "instructions").items()}

    if strict_width:
        for instr in instructions.values():
            if instr.width != cpu_data.instruction_length:
                raise SchemaError(f"Instruction '{instr.mnemonic}' encodes to {instr.width} bits, "
                                  f"instruction_length is {cpu_data.instruction_length}")

    if debug_mode:
        print(f"Debug: Loaded definitions for {len(instructions)} mnemonics, {len(define)} define categories.")
    return IsaModel(cpu_data, define, instructions)

def load_isa_file(file_name: str, strict_width: bool = False, debug_mode: bool = False) -> IsaModel:
    """Reads an ISA description from disk and validates it with load_isa."""
    try:
        with open(file_name, 'rb') as f:
            contents = f.read()
    except OSError as e:
        raise SchemaError(f"Cannot read ISA file '{file_name}': {e.strerror or e}")
    return load_isa(contents, strict_width=strict_width, debug_mode=debug_mode)

# isa_model.py v1.3
