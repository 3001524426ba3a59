"""Encoding of Hack instructions into 16-bit machine words."""

from __future__ import annotations

from dataclasses import dataclass

from hackasm.symbols import SymbolTable

_C_PREFIX = 0b111 << 13
_A_BIT = 1 << 12
_ADDRESS_MASK = 0x7FFF
_DIGITS = frozenset("0123456789")

_COMP_BITS: dict[str, int] = {
    "0": 0b101010,
    "1": 0b111111,
    "-1": 0b111010,
    "D": 0b001100,
    "A": 0b110000,
    "M": 0b110000,
    "!D": 0b001101,
    "!A": 0b110001,
    "!M": 0b110001,
    "-D": 0b001111,
    "-A": 0b110011,
    "-M": 0b110011,
    "D+1": 0b011111,
    "A+1": 0b110111,
    "M+1": 0b110111,
    "D-1": 0b001110,
    "A-1": 0b110010,
    "M-1": 0b110010,
    "D+A": 0b000010,
    "D+M": 0b000010,
    "D-A": 0b010011,
    "D-M": 0b010011,
    "A-D": 0b000111,
    "M-D": 0b000111,
    "D&A": 0b000000,
    "D&M": 0b000000,
    "D|A": 0b010101,
    "D|M": 0b010101,
}

_DEST_BITS: dict[str, int] = {"A": 1 << 5, "D": 1 << 4, "M": 1 << 3}

_JUMP_BITS: dict[str, int] = {
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}


@dataclass(frozen=True)
class CInstruction:
    """The fields of a ``dest=comp;jump`` instruction; absent fields are None."""

    dest: str | None
    comp: str | None
    jump: str | None


def split_c_instruction(text: str) -> CInstruction:
    """Split ``text`` into its dest, comp and jump fields."""
    dest: str | None = None
    rest = text
    if "=" in text:
        dest, rest = text.split("=", 1)
    comp, separator, jump = rest.partition(";")
    return CInstruction(
        dest=dest or None,
        comp=comp or None,
        jump=jump if separator and jump else None,
    )


def encode_a(value: str, symbols: SymbolTable) -> int:
    """Encode the operand of an ``@value`` instruction.

    A decimal operand is used as is; anything else is a symbol, allocated as a
    variable when it is not yet known.
    """
    if all(ch in _DIGITS for ch in value):
        address = int(value) if value else 0
    else:
        address = symbols.add_variable(value)
    return address & _ADDRESS_MASK


def encode_c(text: str) -> int:
    """Encode a ``dest=comp;jump`` instruction.

    Raises ValueError when the comp field is missing or not recognised.
    Unrecognised jump mnemonics encode as no jump.
    """
    fields = split_c_instruction(text)
    if fields.comp is None:
        raise ValueError(f"missing computation in instruction {text!r}")
    try:
        comp_bits = _COMP_BITS[fields.comp]
    except KeyError:
        raise ValueError(f"unknown computation {fields.comp!r} in instruction {text!r}") from None

    word = _C_PREFIX | (comp_bits << 6)
    if "M" in fields.comp:
        word |= _A_BIT
    if fields.dest is not None:
        for register, bit in _DEST_BITS.items():
            if register in fields.dest:
                word |= bit
    if fields.jump is not None:
        word |= _JUMP_BITS.get(fields.jump, 0)
    return word


def encode(instruction: str, symbols: SymbolTable) -> int:
    """Encode one cleaned instruction into a 16-bit word."""
    if instruction.startswith("@"):
        return encode_a(instruction[1:], symbols)
    return encode_c(instruction)