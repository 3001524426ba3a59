"""Assembling Hack source files into ``.hack`` binary text."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from hackasm.code import encode
from hackasm.parser import parse
from hackasm.symbols import SymbolTable


def assemble(lines: Iterable[str], symbols: SymbolTable | None = None) -> list[int]:
    """Assemble source lines into a list of 16-bit machine words."""
    if symbols is None:
        symbols = SymbolTable()
    instructions = parse(lines, symbols)
    return [encode(instruction, symbols) for instruction in instructions]


def _format_word(word: int) -> str:
    return format(word, "016b")


def output_path(input_path: str) -> str:
    """Return the output file name: the input's base name with a ``.hack`` suffix."""
    base = input_path.replace("\\", "/").rpartition("/")[2]
    stem, dot, _ = base.rpartition(".")
    if not dot:
        stem = base
    return f"{stem}.hack"


def write_hack(words: Iterable[int], path: str | Path) -> list[str]:
    """Write words as binary text lines without a final newline; return the lines."""
    lines = [_format_word(word) for word in words]
    with open(path, "w", encoding="ascii") as handle:
        handle.write("\n".join(lines))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble the file named on the command line into ``<name>.hack``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: hackasm inputfile")
        return 1

    source = args[0]
    try:
        with open(source, encoding="utf-8") as handle:
            words = assemble(handle)
    except OSError as error:
        print(f"cannot open input file: {error}", file=sys.stderr)
        return 1

    try:
        lines = write_hack(words, output_path(source))
    except OSError as error:
        print(f"cannot open output file: {error}", file=sys.stderr)
    else:
        for line in lines:
            print(line)

    if not words:
        print("No instructions found.")
    return 0