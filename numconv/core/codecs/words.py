"""
Number words: integer <-> English words

Domain: |n| <= WORDS_LIMIT (fifteen nines, i.e. up to "trillion").

ENCODING:
    |n| is split into base-1000 chunks, least significant first. Every
    nonzero chunk is rendered ("{ones} hundred", then teens or tens + ones)
    and followed by the scale word of its position. Zero chunks emit nothing
    but still advance the scale index. Chunks are prepended, so the result
    reads highest magnitude first.

DECODING:
    Tokens are looked up in WORD_VALUES and folded into a running chunk:
        hundred     -> chunk = (chunk or 1) * 100
        scale word  -> chunk = (chunk or 1) * scale; flush chunk into result
        other       -> chunk += value

    The decoder accepts more than the encoder emits ("thousand five" -> 1005,
    repeated scale words, unordered chunks). That looseness is kept as is.

Examples:
    42      -> "forty two"
    1001    -> "one thousand one"
    -42     -> "negative forty two"
    100000  -> "one hundred thousand"
"""

import logging

from numconv.core.codecs.guards import require_in_range, require_integer, require_non_blank
from numconv.core.codecs.tables import (
    CHUNK_BASE,
    HUNDRED_WORD,
    NEGATIVE_PREFIX,
    ONES_WORDS,
    SCALE_WORDS,
    TEENS_WORDS,
    TENS_WORDS,
    WORD_VALUES,
    WORDS_LIMIT,
    ZERO_WORD,
)
from numconv.core.domain.result import ConversionResult, ErrorKind, failure, success

logger = logging.getLogger(__name__)

OUT_OF_RANGE_MESSAGE = "Number is too large to convert"
EMPTY_INPUT_MESSAGE = "Please enter a value to convert"


# =============================================================================
# CHUNK LEVEL
# =============================================================================


def chunk_to_words(chunk: int) -> list[str]:
    """
    Render one base-1000 chunk (0-999) as a list of words.

    Examples:
        >>> chunk_to_words(0)
        []
        >>> chunk_to_words(115)
        ['one', 'hundred', 'fifteen']
        >>> chunk_to_words(340)
        ['three', 'hundred', 'forty']
    """
    if not 0 <= chunk < CHUNK_BASE:
        raise ValueError(f"Chunk must be in [0, {CHUNK_BASE - 1}], got {chunk}")

    hundreds, remainder = divmod(chunk, 100)
    tens, ones = divmod(remainder, 10)

    words = []
    if hundreds > 0:
        words.extend((ONES_WORDS[hundreds], HUNDRED_WORD))

    if tens == 1:
        words.append(TEENS_WORDS[ones])
    else:
        if tens > 1:
            words.append(TENS_WORDS[tens])
        if ones > 0:
            words.append(ONES_WORDS[ones])

    return words


def iter_chunks(n: int):
    """
    Yield (scale_index, chunk) pairs of a non-negative integer, least significant first.

    Examples:
        >>> list(iter_chunks(1_002_003))
        [(0, 3), (1, 2), (2, 1)]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    scale_index = 0
    while n > 0:
        n, chunk = divmod(n, CHUNK_BASE)
        yield scale_index, chunk
        scale_index += 1


# =============================================================================
# INTEGER -> WORDS
# =============================================================================


def _magnitude_to_words(n: int) -> str:
    words: list[str] = []
    for scale_index, chunk in iter_chunks(n):
        if chunk == 0:
            continue
        chunk_words = chunk_to_words(chunk)
        scale = SCALE_WORDS[scale_index]
        if scale:
            chunk_words.append(scale)
        words = chunk_words + words
    return " ".join(words)


def int_to_words(n: int) -> ConversionResult[str]:
    """
    Encode an integer as lowercase English words.

    Args:
        n: Integer with |n| <= WORDS_LIMIT

    Returns:
        Success with the words, or Failure(OUT_OF_RANGE / INVALID_NUMBER)

    Examples:
        >>> int_to_words(0).value
        'zero'
        >>> int_to_words(-42).value
        'negative forty two'
        >>> int_to_words(1001).value
        'one thousand one'
    """
    rejected = require_integer(n, "Number") or require_in_range(
        n, -WORDS_LIMIT, WORDS_LIMIT, OUT_OF_RANGE_MESSAGE
    )
    if rejected is not None:
        logger.debug("Words encode rejected %r: %s", n, rejected.message)
        return rejected

    if n == 0:
        return success(ZERO_WORD)
    if n < 0:
        return success(NEGATIVE_PREFIX + _magnitude_to_words(-n))
    return success(_magnitude_to_words(n))


# =============================================================================
# WORDS -> INTEGER
# =============================================================================


def words_to_int(s: str) -> ConversionResult[int]:
    """
    Decode English number words.

    Input is lowercased and trimmed; tokens are separated by any whitespace.

    Returns:
        Success with the integer, or Failure(EMPTY_INPUT / INVALID_WORD)

    Examples:
        >>> words_to_int("one thousand one").value
        1001
        >>> words_to_int("Twenty").value
        20
        >>> words_to_int("thousand five").value
        1005
        >>> words_to_int("forty-two").kind
        <ErrorKind.INVALID_WORD: 'INVALID_WORD'>
    """
    rejected = require_non_blank(s, EMPTY_INPUT_MESSAGE)
    if rejected is not None:
        return rejected

    text = s.lower().strip()
    if text == ZERO_WORD:
        return success(0)

    negative = text.startswith(NEGATIVE_PREFIX)
    if negative:
        text = text[len(NEGATIVE_PREFIX):]

    result = 0
    current_chunk = 0
    for token in text.split():
        value = WORD_VALUES.get(token)
        if value is None:
            logger.debug("Words decode rejected %r: unknown token %r", s, token)
            return failure(ErrorKind.INVALID_WORD, f"Invalid word: {token}")

        if value == 100:
            current_chunk = (current_chunk or 1) * value
        elif value >= CHUNK_BASE:
            current_chunk = (current_chunk or 1) * value
            result += current_chunk
            current_chunk = 0
        else:
            current_chunk += value

    result += current_chunk
    return success(-result if negative else result)


# =============================================================================
# CODEC
# =============================================================================


class NumberWordsCodec:
    """Integer <-> English words codec (stateless)."""

    min_value = -WORDS_LIMIT
    max_value = WORDS_LIMIT

    def encode(self, n: int) -> ConversionResult[str]:
        return int_to_words(n)

    def decode(self, s: str) -> ConversionResult[int]:
        return words_to_int(s)
