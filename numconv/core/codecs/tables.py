"""
Lookup tables shared by the numeral and number-word codecs.

All tables are immutable module-level constants. The Roman grammar, the
per-symbol value map and the greedy encoding table live side by side so the
encoder can only ever emit strings the decoder grammar accepts.

INVARIANTS:
1. ROMAN_NUMERALS is strictly descending by value (greedy encoding relies on it)
2. SCALE_WORDS[i] names 1000**i
3. Index 0 of ONES_WORDS and indices 0-1 of TENS_WORDS are never rendered
"""

import re
from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# ROMAN NUMERALS
# =============================================================================

ROMAN_MIN: Final[int] = 1
ROMAN_MAX: Final[int] = 3999

# (value, symbol), additive symbols interleaved with the six subtractive pairs
ROMAN_NUMERALS: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ROMAN_SYMBOL_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {symbol: value for value, symbol in ROMAN_NUMERALS if len(symbol) == 1}
)

# Lookahead rejects the empty string, which the bare grammar would accept
ROMAN_PATTERN: Final[re.Pattern] = re.compile(
    r"(?=[MDCLXVI])M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"
)


# =============================================================================
# ENGLISH NUMBER WORDS
# =============================================================================

WORDS_LIMIT: Final[int] = 999_999_999_999_999

ZERO_WORD: Final[str] = "zero"
NEGATIVE_PREFIX: Final[str] = "negative "
HUNDRED_WORD: Final[str] = "hundred"

ONES_WORDS: Final[tuple[str, ...]] = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)
TEENS_WORDS: Final[tuple[str, ...]] = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
TENS_WORDS: Final[tuple[str, ...]] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)
SCALE_WORDS: Final[tuple[str, ...]] = ("", "thousand", "million", "billion", "trillion")

CHUNK_BASE: Final[int] = 1000


def _build_word_values() -> dict[str, int]:
    values: dict[str, int] = {}
    for i, word in enumerate(ONES_WORDS):
        if word:
            values[word] = i
    for i, word in enumerate(TEENS_WORDS):
        values[word] = i + 10
    for i, word in enumerate(TENS_WORDS):
        if word:
            values[word] = i * 10
    values[HUNDRED_WORD] = 100
    for i, word in enumerate(SCALE_WORDS):
        if word:
            values[word] = CHUNK_BASE ** i
    return values


WORD_VALUES: Final[Mapping[str, int]] = MappingProxyType(_build_word_values())
