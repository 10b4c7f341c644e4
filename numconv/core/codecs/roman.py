"""
Roman numerals: integer <-> Roman numeral string

Domain: [ROMAN_MIN, ROMAN_MAX] = [1, 3999].

Encoding is greedy subtraction over ROMAN_NUMERALS. Because the table holds
the six subtractive pairs (CM, CD, XC, XL, IX, IV) next to the seven additive
symbols, the greedy walk yields the unique minimal-length numeral.

Decoding first checks the full string against ROMAN_PATTERN, then scans left
to right with one symbol of lookahead: a larger next symbol makes a
subtractive pair worth (next - current).

INVARIANTS:
1. decode(encode(n)) == n for every n in the domain
2. encode never emits four repeats of a symbol or a non-standard pair
3. decode never yields a value outside the domain
"""

import logging

from numconv.core.codecs.guards import require_in_range, require_integer
from numconv.core.codecs.tables import (
    ROMAN_MAX,
    ROMAN_MIN,
    ROMAN_NUMERALS,
    ROMAN_PATTERN,
    ROMAN_SYMBOL_VALUES,
)
from numconv.core.domain.result import ConversionResult, ErrorKind, failure, success

logger = logging.getLogger(__name__)

OUT_OF_RANGE_MESSAGE = f"Number must be between {ROMAN_MIN} and {ROMAN_MAX}"
DECODED_OUT_OF_RANGE_MESSAGE = (
    f"Roman numeral must represent a number between {ROMAN_MIN} and {ROMAN_MAX}"
)
INVALID_FORMAT_MESSAGE = "Invalid Roman numeral"


# =============================================================================
# INTEGER -> ROMAN
# =============================================================================


def int_to_roman(n: int) -> ConversionResult[str]:
    """
    Encode an integer as an uppercase Roman numeral.

    Args:
        n: Integer in [1, 3999]

    Returns:
        Success with the numeral, or Failure(OUT_OF_RANGE / INVALID_NUMBER)

    Examples:
        >>> int_to_roman(1994).value
        'MCMXCIV'
        >>> int_to_roman(58).value
        'LVIII'
        >>> int_to_roman(0).kind
        <ErrorKind.OUT_OF_RANGE: 'OUT_OF_RANGE'>
    """
    rejected = require_integer(n, "Number") or require_in_range(
        n, ROMAN_MIN, ROMAN_MAX, OUT_OF_RANGE_MESSAGE
    )
    if rejected is not None:
        logger.debug("Roman encode rejected %r: %s", n, rejected.message)
        return rejected

    parts = []
    remaining = n
    for value, symbol in ROMAN_NUMERALS:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value

    return success("".join(parts))


# =============================================================================
# ROMAN -> INTEGER
# =============================================================================


def is_valid_roman(s: str) -> bool:
    """True if s (trimmed, any case) is a well-formed numeral in the domain."""
    return ROMAN_PATTERN.fullmatch(s.strip().upper()) is not None


def roman_to_int(s: str) -> ConversionResult[int]:
    """
    Decode a Roman numeral.

    Input is trimmed and uppercased first, so "mcmxciv" and " XIV " are
    accepted. Anything the standard grammar rejects, including the empty
    string, "IIII" and "VX", is INVALID_FORMAT.

    Examples:
        >>> roman_to_int("MCMXCIV").value
        1994
        >>> roman_to_int("IIII").kind
        <ErrorKind.INVALID_FORMAT: 'INVALID_FORMAT'>
    """
    roman = s.strip().upper()
    if ROMAN_PATTERN.fullmatch(roman) is None:
        logger.debug("Roman decode rejected %r: grammar mismatch", s)
        return failure(ErrorKind.INVALID_FORMAT, INVALID_FORMAT_MESSAGE)

    total = 0
    i = 0
    while i < len(roman):
        current = ROMAN_SYMBOL_VALUES[roman[i]]
        following = ROMAN_SYMBOL_VALUES[roman[i + 1]] if i + 1 < len(roman) else 0

        if following > current:
            total += following - current
            i += 2
        else:
            total += current
            i += 1

    # The grammar caps the value at ROMAN_MAX; the domain is still enforced here
    rejected = require_in_range(total, ROMAN_MIN, ROMAN_MAX, DECODED_OUT_OF_RANGE_MESSAGE)
    if rejected is not None:
        return rejected

    return success(total)


# =============================================================================
# CODEC
# =============================================================================


class RomanNumeralCodec:
    """Integer <-> Roman numeral codec (stateless)."""

    min_value = ROMAN_MIN
    max_value = ROMAN_MAX

    def encode(self, n: int) -> ConversionResult[str]:
        return int_to_roman(n)

    def decode(self, s: str) -> ConversionResult[int]:
        return roman_to_int(s)
