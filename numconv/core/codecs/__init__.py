"""
Core codecs for numconv

Stateless number conversions with explicit success/failure results.
"""

# Lookup tables
from numconv.core.codecs.tables import (
    ROMAN_MAX,
    ROMAN_MIN,
    ROMAN_NUMERALS,
    ROMAN_PATTERN,
    ROMAN_SYMBOL_VALUES,
    SCALE_WORDS,
    WORD_VALUES,
    WORDS_LIMIT,
)

# Roman numerals
from numconv.core.codecs.roman import (
    RomanNumeralCodec,
    int_to_roman,
    is_valid_roman,
    roman_to_int,
)

# Number words
from numconv.core.codecs.words import (
    NumberWordsCodec,
    chunk_to_words,
    int_to_words,
    iter_chunks,
    words_to_int,
)

# Number bases
from numconv.core.codecs.bases import (
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

__all__ = [
    # Tables, Constants
    "ROMAN_MAX",
    "ROMAN_MIN",
    "ROMAN_NUMERALS",
    "ROMAN_PATTERN",
    "ROMAN_SYMBOL_VALUES",
    "SCALE_WORDS",
    "WORD_VALUES",
    "WORDS_LIMIT",
    # Roman, Codec
    "RomanNumeralCodec",
    # Roman, Functions
    "int_to_roman",
    "is_valid_roman",
    "roman_to_int",
    # Words, Codec
    "NumberWordsCodec",
    # Words, Functions
    "chunk_to_words",
    "int_to_words",
    "iter_chunks",
    "words_to_int",
    # Bases, Constants
    "MAX_DIGITS",
    "MAX_SHIFT_AMOUNT",
    # Bases, Codec
    "NumberBaseCodec",
    # Bases, Functions
    "apply_bitwise",
    "binary_to_text",
    "convert_base",
    "parse_in_system",
    "represent",
    "text_to_binary",
]
