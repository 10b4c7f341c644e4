"""
Number bases: binary / decimal / hexadecimal / octal / ASCII text

Parses a field typed in one number system and renders the value in all of
them. Text input is turned into space-separated 8-bit bytes instead. Bitwise
operations (AND, OR, XOR, NOT, shifts) work on binary operands and report the
result in every system.

Python integers are unbounded: NOT and shifts are not truncated to a machine
word, so ~0b101 is -6 and renders as "-110". Shift distances are capped by
MAX_SHIFT_AMOUNT.

INVARIANTS:
1. Input fields hold at most MAX_DIGITS significant digits (leading zeros
   are free); longer fields are OUT_OF_RANGE
2. Every rendered value stays within the interpreter's int/str digit limit,
   so no operation here raises for user input
"""

import logging
import re
from typing import Final

from numconv.core.codecs.guards import require_non_blank
from numconv.core.domain.request import BaseRepresentation, BitwiseOperation, NumberSystem
from numconv.core.domain.result import ConversionResult, ErrorKind, failure, success

logger = logging.getLogger(__name__)

MAX_SHIFT_AMOUNT: Final[int] = 4096
MAX_DIGITS: Final[int] = 2048

EMPTY_INPUT_MESSAGE = "Please enter a value to convert"
TOO_MANY_DIGITS_MESSAGE = f"Number must have at most {MAX_DIGITS} digits"

_DIGIT_PATTERNS: Final[dict[NumberSystem, re.Pattern]] = {
    NumberSystem.BINARY: re.compile(r"[01]+"),
    NumberSystem.DECIMAL: re.compile(r"[0-9]+"),
    NumberSystem.HEXADECIMAL: re.compile(r"[0-9A-Fa-f]+"),
    NumberSystem.OCTAL: re.compile(r"[0-7]+"),
}

_RADIX: Final[dict[NumberSystem, int]] = {
    NumberSystem.BINARY: 2,
    NumberSystem.DECIMAL: 10,
    NumberSystem.HEXADECIMAL: 16,
    NumberSystem.OCTAL: 8,
}


# =============================================================================
# PARSE / RENDER
# =============================================================================


def is_valid_in_system(text: str, system: NumberSystem) -> bool:
    pattern = _DIGIT_PATTERNS.get(NumberSystem(system))
    if pattern is None:
        raise ValueError(f"{system} has no digit set")
    return pattern.fullmatch(text) is not None


def _too_many_digits(digits: str) -> bool:
    return len(digits.lstrip("0")) > MAX_DIGITS


def parse_in_system(text: str, system: NumberSystem) -> ConversionResult[int]:
    """
    Parse non-negative digits typed in a numeric system.

    Examples:
        >>> parse_in_system("ff", NumberSystem.HEXADECIMAL).value
        255
        >>> parse_in_system("102", NumberSystem.BINARY).message
        'Invalid binary number'
    """
    system = NumberSystem(system)
    if system is NumberSystem.TEXT:
        raise ValueError("Text input has no numeric value; use text_to_binary")

    rejected = require_non_blank(text, EMPTY_INPUT_MESSAGE)
    if rejected is not None:
        return rejected

    digits = text.strip()
    if not is_valid_in_system(digits, system):
        logger.debug("Base parse rejected %r as %s", text, system.value)
        return failure(ErrorKind.INVALID_FORMAT, f"Invalid {system.value} number")
    if _too_many_digits(digits):
        return failure(ErrorKind.OUT_OF_RANGE, TOO_MANY_DIGITS_MESSAGE)

    return success(int(digits, _RADIX[system]))


def _signed_format(n: int, spec: str) -> str:
    if n < 0:
        return "-" + format(-n, spec)
    return format(n, spec)


def represent(n: int) -> BaseRepresentation:
    """
    Render an integer in every numeric system.

    Examples:
        >>> represent(10).hexadecimal
        'A'
        >>> represent(-6).binary
        '-110'
    """
    return BaseRepresentation(
        binary=_signed_format(n, "b"),
        decimal=str(n),
        hexadecimal=_signed_format(n, "X"),
        octal=_signed_format(n, "o"),
    )


# =============================================================================
# TEXT <-> BINARY BYTES
# =============================================================================


def text_to_binary(text: str) -> str:
    """
    Each character's code point as zero-padded 8-bit binary, space separated.

    Code points above 255 keep all their bits (wider than 8 digits).

    Examples:
        >>> text_to_binary("Hi")
        '01001000 01101001'
    """
    return " ".join(format(ord(ch), "08b") for ch in text)


def binary_to_text(binary: str) -> ConversionResult[str]:
    """
    Inverse of text_to_binary.

    Examples:
        >>> binary_to_text("01001000 01101001").value
        'Hi'
    """
    rejected = require_non_blank(binary, EMPTY_INPUT_MESSAGE)
    if rejected is not None:
        return rejected

    chars = []
    for byte in binary.split():
        if not is_valid_in_system(byte, NumberSystem.BINARY):
            return failure(ErrorKind.INVALID_FORMAT, f"Invalid binary byte: {byte}")
        code = int(byte, 2)
        if code > 0x10FFFF:
            return failure(ErrorKind.OUT_OF_RANGE, f"Not a character code: {byte}")
        chars.append(chr(code))

    return success("".join(chars))


# =============================================================================
# CONVERSION
# =============================================================================


def convert_base(text: str, system: NumberSystem) -> ConversionResult[BaseRepresentation]:
    """
    Convert a field typed in `system` to every representation.

    Text input is not trimmed: leading and trailing spaces are characters too.
    """
    system = NumberSystem(system)
    rejected = require_non_blank(text, EMPTY_INPUT_MESSAGE)
    if rejected is not None:
        return rejected

    if system is NumberSystem.TEXT:
        return success(BaseRepresentation(binary=text_to_binary(text), text=text))

    return parse_in_system(text, system).map(represent)


# =============================================================================
# BITWISE OPERATIONS
# =============================================================================


def _parse_shift_amount(shift_amount: str) -> ConversionResult[int]:
    text = shift_amount.strip()
    try:
        amount = int(text)
    except ValueError:
        return failure(ErrorKind.INVALID_NUMBER, "Invalid shift amount")

    if amount < 0:
        return failure(ErrorKind.INVALID_NUMBER, "Invalid shift amount")
    if amount > MAX_SHIFT_AMOUNT:
        return failure(
            ErrorKind.OUT_OF_RANGE,
            f"Shift amount must be at most {MAX_SHIFT_AMOUNT}",
        )
    return success(amount)


def apply_bitwise(
    operation: BitwiseOperation,
    operand1: str,
    operand2: str = "",
    shift_amount: str = "1",
) -> ConversionResult[BaseRepresentation]:
    """
    Apply a bitwise operation to binary operands.

    Args:
        operation: AND / OR / XOR take operand2; NOT takes only operand1;
            LEFT_SHIFT / RIGHT_SHIFT take shift_amount
        operand1: First operand, binary digits
        operand2: Second operand, binary digits (binary operations only)
        shift_amount: Non-negative decimal shift distance (shifts only)

    Returns:
        Success with the result in every system, or a Failure

    Examples:
        >>> apply_bitwise(BitwiseOperation.AND, "1100", "1010").value.binary
        '1000'
        >>> apply_bitwise(BitwiseOperation.LEFT_SHIFT, "11", shift_amount="2").value.decimal
        '12'
    """
    operation = BitwiseOperation(operation)

    rejected = require_non_blank(operand1, "Please enter the first operand")
    if rejected is not None:
        return rejected

    first = operand1.strip()
    if not is_valid_in_system(first, NumberSystem.BINARY):
        return failure(ErrorKind.INVALID_FORMAT, "First operand must be a binary number")
    if _too_many_digits(first):
        return failure(ErrorKind.OUT_OF_RANGE, TOO_MANY_DIGITS_MESSAGE)
    a = int(first, 2)

    if operation is BitwiseOperation.NOT:
        return success(represent(~a))

    if operation in (BitwiseOperation.LEFT_SHIFT, BitwiseOperation.RIGHT_SHIFT):
        parsed = _parse_shift_amount(shift_amount)
        if not parsed.ok:
            return parsed
        amount = parsed.value
        value = a << amount if operation is BitwiseOperation.LEFT_SHIFT else a >> amount
        return success(represent(value))

    second = operand2.strip()
    if not second or not is_valid_in_system(second, NumberSystem.BINARY):
        return failure(ErrorKind.INVALID_FORMAT, "Second operand must be a binary number")
    if _too_many_digits(second):
        return failure(ErrorKind.OUT_OF_RANGE, TOO_MANY_DIGITS_MESSAGE)
    b = int(second, 2)

    if operation is BitwiseOperation.AND:
        value = a & b
    elif operation is BitwiseOperation.OR:
        value = a | b
    else:
        value = a ^ b

    logger.debug("Bitwise %s(%s, %s) = %d", operation.value, first, second, value)
    return success(represent(value))


# =============================================================================
# CODEC
# =============================================================================


class NumberBaseCodec:
    """Number-system converter (stateless)."""

    def encode(self, n: int) -> BaseRepresentation:
        return represent(n)

    def decode(self, text: str, system: NumberSystem) -> ConversionResult[int]:
        return parse_in_system(text, system)

    def convert(self, text: str, system: NumberSystem) -> ConversionResult[BaseRepresentation]:
        return convert_base(text, system)

    def apply_bitwise(
        self,
        operation: BitwiseOperation,
        operand1: str,
        operand2: str = "",
        shift_amount: str = "1",
    ) -> ConversionResult[BaseRepresentation]:
        return apply_bitwise(operation, operand1, operand2, shift_amount)
