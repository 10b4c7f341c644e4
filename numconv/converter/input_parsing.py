"""
Parsing of numeric form fields

Fields arrive as raw text. The Roman field reads the leading integer and
ignores whatever follows it ("12.7" -> 12, "7 apples" -> 7). The words
field accepts decimals and rounds them half up (2.5 -> 3, -2.5 -> -2).
"""

import re
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation

from numconv.core.domain.result import ConversionResult, ErrorKind, failure, success

INVALID_NUMBER_MESSAGE = "Please enter a valid number"
TOO_LARGE_MESSAGE = "Number is too large to convert"

_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_leading_integer(text: str) -> ConversionResult[int]:
    """
    Parse the integer at the start of a field, ignoring any trailing text.

    Examples:
        >>> parse_leading_integer("12.7").value
        12
        >>> parse_leading_integer("-3e5").value
        -3
        >>> parse_leading_integer("x12").kind
        <ErrorKind.INVALID_NUMBER: 'INVALID_NUMBER'>
    """
    match = _LEADING_INTEGER.match(text.strip())
    if match is None:
        return failure(ErrorKind.INVALID_NUMBER, INVALID_NUMBER_MESSAGE)
    try:
        return success(int(match.group()))
    except ValueError:
        # more digits than int() converts
        return failure(ErrorKind.OUT_OF_RANGE, TOO_LARGE_MESSAGE)


def parse_decimal(text: str) -> ConversionResult[Decimal]:
    """Parse a finite decimal field ("12", "-3.75", "1e3")."""
    try:
        value = Decimal(text.strip())
    except InvalidOperation:
        return failure(ErrorKind.INVALID_NUMBER, INVALID_NUMBER_MESSAGE)

    if not value.is_finite():
        return failure(ErrorKind.INVALID_NUMBER, INVALID_NUMBER_MESSAGE)
    return success(value)


def round_half_up(value: Decimal) -> int:
    """
    Round to the nearest integer, ties toward positive infinity.

    Examples:
        >>> round_half_up(Decimal("2.5"))
        3
        >>> round_half_up(Decimal("-2.5"))
        -2
        >>> round_half_up(Decimal("-2.6"))
        -3
    """
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return int(value.to_integral_value(rounding=rounding))


def parse_rounded_integer(text: str, limit: int) -> ConversionResult[int]:
    """
    Parse a decimal field, check |value| <= limit, then round half up.

    The limit applies before rounding, so limit + 0.4 is rejected.
    Exponents of any size are compared exactly: "1e1000000" is OUT_OF_RANGE.
    """
    parsed = parse_decimal(text)
    if not parsed.ok:
        return parsed

    # copy_abs() ignores the decimal context, so huge exponents cannot overflow
    if parsed.value.copy_abs() > limit:
        return failure(ErrorKind.OUT_OF_RANGE, TOO_LARGE_MESSAGE)
    return success(round_half_up(parsed.value))
