"""
Tests for the number-base codec

Covers:
- Parsing per number system and digit validation
- Rendering in every system
- ASCII text <-> binary bytes
- Bitwise operations on binary operands
"""

import pytest

from numconv.core.codecs import (
    MAX_DIGITS,
    MAX_SHIFT_AMOUNT,
    NumberBaseCodec,
    apply_bitwise,
    binary_to_text,
    convert_base,
    parse_in_system,
    represent,
    text_to_binary,
)
from numconv.core.domain import BitwiseOperation, ErrorKind, NumberSystem


# =============================================================================
# PARSE / RENDER
# =============================================================================


class TestParseInSystem:
    """Digit validation and parsing."""

    def test_valid(self):
        assert parse_in_system("1010", NumberSystem.BINARY).value == 10
        assert parse_in_system("255", NumberSystem.DECIMAL).value == 255
        assert parse_in_system("ff", NumberSystem.HEXADECIMAL).value == 255
        assert parse_in_system("FF", NumberSystem.HEXADECIMAL).value == 255
        assert parse_in_system("17", NumberSystem.OCTAL).value == 15
        assert parse_in_system(" 101 ", "binary").value == 5

    def test_invalid_digits(self):
        cases = [
            ("102", NumberSystem.BINARY, "Invalid binary number"),
            ("-5", NumberSystem.DECIMAL, "Invalid decimal number"),
            ("xyz", NumberSystem.HEXADECIMAL, "Invalid hexadecimal number"),
            ("89", NumberSystem.OCTAL, "Invalid octal number"),
        ]
        for text, system, message in cases:
            result = parse_in_system(text, system)
            assert result.kind is ErrorKind.INVALID_FORMAT
            assert result.message == message

    def test_empty(self):
        assert parse_in_system("  ", NumberSystem.BINARY).kind is ErrorKind.EMPTY_INPUT

    def test_text_system_has_no_numeric_value(self):
        with pytest.raises(ValueError):
            parse_in_system("abc", NumberSystem.TEXT)

    def test_digit_cap(self):
        """Fields longer than MAX_DIGITS significant digits are OUT_OF_RANGE."""
        for system in (NumberSystem.DECIMAL, NumberSystem.BINARY, NumberSystem.HEXADECIMAL):
            result = parse_in_system("1" * 5000, system)
            assert result.kind is ErrorKind.OUT_OF_RANGE
            assert result.message == f"Number must have at most {MAX_DIGITS} digits"

        assert parse_in_system("9" * MAX_DIGITS, NumberSystem.DECIMAL).value == 10**MAX_DIGITS - 1

    def test_leading_zeros_not_counted(self):
        assert parse_in_system("0" * 5000 + "101", NumberSystem.BINARY).value == 5


class TestRepresent:
    """Rendering in every system."""

    def test_positive(self):
        rep = represent(10)
        assert rep.binary == "1010"
        assert rep.decimal == "10"
        assert rep.hexadecimal == "A"
        assert rep.octal == "12"
        assert rep.text is None

    def test_zero(self):
        rep = represent(0)
        assert (rep.binary, rep.decimal, rep.hexadecimal, rep.octal) == ("0", "0", "0", "0")

    def test_negative(self):
        rep = represent(-6)
        assert rep.binary == "-110"
        assert rep.decimal == "-6"
        assert rep.hexadecimal == "-6"
        assert rep.octal == "-6"


# =============================================================================
# TEXT
# =============================================================================


class TestText:
    """ASCII text <-> binary bytes."""

    def test_text_to_binary(self):
        assert text_to_binary("Hi") == "01001000 01101001"
        assert text_to_binary("") == ""

    def test_binary_to_text(self):
        assert binary_to_text("01001000 01101001").value == "Hi"
        assert binary_to_text(text_to_binary("hello world")).value == "hello world"

    def test_binary_to_text_invalid(self):
        assert binary_to_text("0102").kind is ErrorKind.INVALID_FORMAT
        assert binary_to_text("").kind is ErrorKind.EMPTY_INPUT

    def test_convert_text_keeps_spaces(self):
        rep = convert_base(" a", NumberSystem.TEXT).value
        assert rep.binary == "00100000 01100001"
        assert rep.text == " a"
        assert rep.decimal == ""


class TestConvertBase:
    """Full conversion of a typed field."""

    def test_hex_field(self):
        rep = convert_base("ff", NumberSystem.HEXADECIMAL).value
        assert rep.decimal == "255"
        assert rep.hexadecimal == "FF"
        assert rep.binary == "11111111"
        assert rep.octal == "377"

    def test_failures_pass_through(self):
        assert convert_base("12", NumberSystem.BINARY).kind is ErrorKind.INVALID_FORMAT
        assert convert_base("", NumberSystem.TEXT).kind is ErrorKind.EMPTY_INPUT

    def test_long_field_does_not_raise(self):
        assert convert_base("1" * 15000, NumberSystem.BINARY).kind is ErrorKind.OUT_OF_RANGE
        assert convert_base("f" * MAX_DIGITS, NumberSystem.HEXADECIMAL).ok

    def test_codec_facade(self):
        codec = NumberBaseCodec()
        assert codec.encode(8).octal == "10"
        assert codec.decode("10", NumberSystem.OCTAL).value == 8
        assert codec.convert("7", NumberSystem.DECIMAL).value.binary == "111"


# =============================================================================
# BITWISE
# =============================================================================


class TestApplyBitwise:
    """Bitwise operations on binary operands."""

    def test_binary_operations(self):
        assert apply_bitwise(BitwiseOperation.AND, "1100", "1010").value.binary == "1000"
        assert apply_bitwise(BitwiseOperation.OR, "1100", "1010").value.binary == "1110"
        assert apply_bitwise(BitwiseOperation.XOR, "1100", "1010").value.binary == "110"

    def test_not_is_unbounded(self):
        rep = apply_bitwise(BitwiseOperation.NOT, "101").value
        assert rep.decimal == "-6"
        assert rep.binary == "-110"

    def test_shifts(self):
        assert apply_bitwise(BitwiseOperation.LEFT_SHIFT, "11", shift_amount="2").value.decimal == "12"
        assert apply_bitwise(BitwiseOperation.RIGHT_SHIFT, "1100", shift_amount="2").value.binary == "11"
        assert apply_bitwise(BitwiseOperation.LEFT_SHIFT, "1").value.binary == "10"

    def test_invalid_shift_amount(self):
        for amount in ("-1", "abc", "1.5"):
            result = apply_bitwise(BitwiseOperation.LEFT_SHIFT, "1", shift_amount=amount)
            assert result.kind is ErrorKind.INVALID_NUMBER
            assert result.message == "Invalid shift amount"

        too_far = apply_bitwise(
            BitwiseOperation.LEFT_SHIFT, "1", shift_amount=str(MAX_SHIFT_AMOUNT + 1)
        )
        assert too_far.kind is ErrorKind.OUT_OF_RANGE

    def test_operand_validation(self):
        empty = apply_bitwise(BitwiseOperation.AND, " ", "1")
        assert empty.kind is ErrorKind.EMPTY_INPUT
        assert empty.message == "Please enter the first operand"

        bad_first = apply_bitwise(BitwiseOperation.AND, "12", "1")
        assert bad_first.message == "First operand must be a binary number"

        missing_second = apply_bitwise(BitwiseOperation.XOR, "1", "")
        assert missing_second.kind is ErrorKind.INVALID_FORMAT
        assert missing_second.message == "Second operand must be a binary number"

    def test_long_operands(self):
        long_operand = "1" * (MAX_DIGITS + 1)
        assert apply_bitwise(BitwiseOperation.NOT, long_operand).kind is ErrorKind.OUT_OF_RANGE
        assert apply_bitwise(BitwiseOperation.AND, "1", long_operand).kind is ErrorKind.OUT_OF_RANGE

    def test_widest_shift_renders(self):
        result = apply_bitwise(
            BitwiseOperation.LEFT_SHIFT, "1" * MAX_DIGITS, shift_amount=str(MAX_SHIFT_AMOUNT)
        )
        assert result.ok
        assert len(result.value.binary) == MAX_DIGITS + MAX_SHIFT_AMOUNT

    def test_operation_given_as_string(self):
        assert apply_bitwise("OR", "1", "10").value.binary == "11"
        with pytest.raises(ValueError):
            apply_bitwise("NAND", "1", "10")
