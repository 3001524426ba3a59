"""Symbol table for Hack assembly: predefined symbols, labels and variables."""

from __future__ import annotations

PREDEFINED_SYMBOLS: dict[str, int] = {
    **{f"R{n}": n for n in range(16)},
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": 16384,
    "KBD": 24576,
}

FIRST_VARIABLE_ADDRESS = 16


class SymbolTable:
    """Maps symbol names to addresses.

    User-defined symbols (labels and variables) are searched before the
    predefined ones.
    """

    def __init__(self) -> None:
        self._defined: dict[str, int] = {}
        self._next_variable = FIRST_VARIABLE_ADDRESS
        self._reserved = frozenset(PREDEFINED_SYMBOLS.values())

    def __contains__(self, name: object) -> bool:
        return self.lookup(name) is not None  # type: ignore[arg-type]

    def lookup(self, name: str) -> int | None:
        """Return the address bound to ``name``, or None if it is unknown."""
        if name in self._defined:
            return self._defined[name]
        return PREDEFINED_SYMBOLS.get(name)

    def add_label(self, label: str, row: int) -> None:
        """Bind ``label`` to instruction ``row`` unless the name is already known."""
        if label not in self:
            self._defined[label] = row

    def add_variable(self, name: str) -> int:
        """Return the address of ``name``, allocating a new variable slot if needed."""
        address = self.lookup(name)
        if address is not None:
            return address
        while self._next_variable in self._reserved:
            self._next_variable += 1
        address = self._next_variable
        self._next_variable += 1
        self._defined[name] = address
        return address