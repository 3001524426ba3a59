"""Assembler for the Hack machine language: symbols, parsing, encoding and the command."""

__version__ = "0.1.0"
__all__ = ["symbols", "parser", "code", "assembler"]