"""Splitting Hack assembly source into instructions and collecting labels."""

from __future__ import annotations

from collections.abc import Iterable

from hackasm.symbols import SymbolTable

_SKIP_STARTS = ("/", "\n", "\r")
_STRIPPED_CHARS = str.maketrans("", "", " \t\r")


def clean_line(line: str) -> str | None:
    """Return the significant text of a source line, or None if it holds none.

    Lines whose first non-blank character is ``/`` are skipped entirely;
    otherwise the ``//`` comment, the line ending and all blanks are removed.
    """
    text = line.lstrip(" \t")
    if not text or text.startswith(_SKIP_STARTS):
        return None
    text = text.split("//", 1)[0]
    text = text.split("\n", 1)[0]
    cleaned = text.translate(_STRIPPED_CHARS)
    return cleaned or None


def parse(lines: Iterable[str], symbols: SymbolTable) -> list[str]:
    """Return the instructions in ``lines``, registering labels in ``symbols``.

    A label ``(NAME)`` is bound to the index of the instruction that follows
    it and does not appear in the result.
    """
    instructions: list[str] = []
    for line in lines:
        text = clean_line(line)
        if text is None:
            continue
        if text.startswith("(") and text.endswith(")"):
            label = text[1:-1]
            if label:
                symbols.add_label(label, len(instructions))
            continue
        instructions.append(text)
    return instructions