# hackasm

An assembler for the Hack machine language. It reads a `.asm` source file and
writes the matching `.hack` file, with one 16-character binary word per
instruction.

## Installation

```
pip install .
```

## Command line

```
hackasm Prog.asm
```

This writes `Prog.hack` to the current working directory. The name is the
input's base name with its last extension removed, and the input's directory
is dropped. Both `/` and `\` count as directory separators. The words in the
file are separated by newlines, and there is no newline after the last word.
Each binary word is also printed to standard output.

If the file has no instructions, the command prints `No instructions found.`
It exits with status 1 if no input file is given or if the input cannot be
opened. If the output file cannot be written, it reports the error and
exits with status 0.

## What it understands

- A-instructions: `@123` for decimal constants, and `@name` for symbols.
  Values are kept to their low 15 bits. An `@` with nothing after it encodes
  as address 0.
- Predefined symbols: `R0`–`R15`, `SP`, `LCL`, `ARG`, `THIS`, `THAT`,
  `SCREEN` and `KBD`.
- Labels: `(LOOP)` binds `LOOP` to the index of the next instruction. If a
  name is already known, the label does not rebind it.
- Variables: an unknown symbol gets the next free address. Addresses count up
  from 16 and skip any address that a predefined symbol uses.
- C-instructions of the form `dest=comp;jump`, where `dest` and `jump` may be
  left out. An `M` in `comp` sets the a-bit. Each of the letters `A`, `D` and
  `M` found in `dest` sets its own destination bit.
- Whitespace anywhere in a line, `//` comments, and blank lines. A line whose
  first non-blank character is `/` is skipped entirely.

## Errors

`encode_c` raises `ValueError` when the computation is missing or not one of
the standard Hack computations. The command does not catch this error. A jump
mnemonic that is not recognised encodes as "no jump".

## Library use

```python
from hackasm.symbols import SymbolTable
from hackasm.assembler import assemble, write_hack

symbols = SymbolTable()
words = assemble(["@2", "D=A", "@3", "D=D+A", "@0", "M=D"], symbols)
lines = write_hack(words, "Add.hack")  # the binary text lines that were written
```

`assemble` makes a fresh `SymbolTable` when none is passed.

Lower-level pieces:

- `hackasm.symbols`: `SymbolTable` with `lookup`, `add_label`, `add_variable`
  and `in` membership tests
- `hackasm.parser`: `parse(lines, symbols)`, which returns the cleaned
  instructions and registers labels, and `clean_line(line)`
- `hackasm.code`: `encode`, `encode_a`, `encode_c`, `split_c_instruction` and
  the `CInstruction` dataclass with fields `dest`, `comp` and `jump`
- `hackasm.assembler`: `output_path` and `main`

## Limitations

The assembler does not check operand syntax beyond what is described above. It
does not report line numbers. It does not read a directory of files or write
anywhere except the current working directory.

## Running the tests

```
pip install .[test]
pytest
```