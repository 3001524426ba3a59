import pytest

from hackasm.code import CInstruction, encode, encode_a, encode_c, split_c_instruction
from hackasm.symbols import SymbolTable


@pytest.mark.parametrize(
    "text, expected",
    [
        ("D=M", CInstruction("D", "M", None)),
        ("0;JMP", CInstruction(None, "0", "JMP")),
        ("AM=D+1;JNE", CInstruction("AM", "D+1", "JNE")),
        ("D", CInstruction(None, "D", None)),
        ("=D;", CInstruction(None, "D", None)),
    ],
)
def test_split_c_instruction(text, expected):
    assert split_c_instruction(text) == expected


def test_encode_a_number():
    assert encode_a("5", SymbolTable()) == 5


def test_encode_a_predefined_symbol():
    assert encode_a("SCREEN", SymbolTable()) == 16384


def test_encode_a_new_variable():
    symbols = SymbolTable()
    assert encode_a("counter", symbols) == 16
    assert symbols.lookup("counter") == 16


def test_encode_a_empty_is_zero():
    assert encode_a("", SymbolTable()) == encode_a("0", SymbolTable())


def test_encode_a_fits_fifteen_bits():
    assert encode_a("32768", SymbolTable()) == encode_a("0", SymbolTable())


def test_encode_d_equals_a():
    assert encode_c("D=A") == 0b1110110000010000


def test_encode_unconditional_jump():
    assert encode_c("0;JMP") == 0b1110101010000111


@pytest.mark.parametrize("comp", ["0", "1", "-1", "D", "A", "D+A", "D|M", "M-1"])
def test_c_instruction_prefix(comp):
    assert encode_c(comp) >> 13 == encode_c("0") >> 13
    assert encode_c(comp) < 1 << 16


@pytest.mark.parametrize(
    "a_form, m_form",
    [("A", "M"), ("!A", "!M"), ("-A", "-M"), ("A+1", "M+1"), ("A-1", "M-1"),
     ("D+A", "D+M"), ("D-A", "D-M"), ("A-D", "M-D"), ("D&A", "D&M"), ("D|A", "D|M")],
)
def test_m_forms_set_only_a_bit(a_form, m_form):
    assert encode_c(m_form) ^ encode_c(a_form) == 1 << 12


def test_dest_bits_combine():
    assert encode_c("AMD=0") == encode_c("A=0") | encode_c("M=0") | encode_c("D=0")


def test_jump_bits_combine():
    assert encode_c("0;JGE") == encode_c("0;JGT") | encode_c("0;JEQ")
    assert encode_c("0;JNE") == encode_c("0;JGT") | encode_c("0;JLT")
    assert encode_c("0;JMP") == encode_c("0;JLE") | encode_c("0;JGT")


def test_unknown_jump_is_ignored():
    assert encode_c("D;JXX") == encode_c("D")


def test_unknown_comp_raises():
    with pytest.raises(ValueError):
        encode_c("D=Q")


def test_missing_comp_raises():
    with pytest.raises(ValueError):
        encode_c("D=")


def test_encode_dispatch():
    symbols = SymbolTable()
    assert encode("@7", symbols) == encode_a("7", symbols)
    assert encode("D=M", symbols) == encode_c("D=M")