"""Converter: single-field conversion facade

Stands where the calculator pages call into the codecs:
- takes the raw field text and the mode toggle
- parses numeric fields
- dispatches to the Roman, words or base codec
- returns a ConversionResult, or for handle()/handle_bitwise() a
  display-ready response dict that satisfies the conversion_response contract

Failures never raise. A payload that violates its request contract comes back
as an INVALID_FORMAT response.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from jsonschema import ValidationError as ContractViolation
from pydantic import ValidationError

from numconv.core.codecs.bases import NumberBaseCodec
from numconv.core.codecs.roman import RomanNumeralCodec
from numconv.core.codecs.tables import WORDS_LIMIT
from numconv.core.codecs.words import NumberWordsCodec
from numconv.core.contracts.validators import contract_validator, validate_conversion_response
from numconv.core.domain.request import (
    BitwiseRequest,
    ConversionMode,
    ConversionRequest,
    ConversionResponse,
)
from numconv.core.domain.result import ConversionResult, ErrorKind, failure
from numconv.converter.input_parsing import parse_leading_integer, parse_rounded_integer

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a value to convert"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Converter configuration.

    roman_lowercase: render Roman numerals as i, ii, iii... instead of I, II, III
    words_limit: largest |n| accepted by to_words (at most WORDS_LIMIT)
    validate_contracts: check handle() payloads against the JSON contracts
    """

    roman_lowercase: bool = False
    words_limit: int = WORDS_LIMIT
    validate_contracts: bool = True

    def __post_init__(self):
        if not 0 < self.words_limit <= WORDS_LIMIT:
            raise ValueError(
                f"words_limit must be in (0, {WORDS_LIMIT}], got {self.words_limit}"
            )


# =============================================================================
# CONVERTER
# =============================================================================


class Converter:
    """Single-field converter over the Roman, words and base codecs.

    Order of checks in convert():
    1. Blank field -> EMPTY_INPUT
    2. Numeric field parsing (to_roman, to_words)
    3. Codec call
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        roman: RomanNumeralCodec | None = None,
        words: NumberWordsCodec | None = None,
        bases: NumberBaseCodec | None = None,
    ):
        self.config = config or ConverterConfig()
        self.roman = roman or RomanNumeralCodec()
        self.words = words or NumberWordsCodec()
        self.bases = bases or NumberBaseCodec()

        self._request_validator = None
        self._bitwise_validator = None
        if self.config.validate_contracts:
            self._request_validator = contract_validator("conversion_request")
            self._bitwise_validator = contract_validator("bitwise_request")

    # -------------------------------------------------------------------------
    # Typed API
    # -------------------------------------------------------------------------

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Run one conversion.

        Args:
            request: mode toggle, raw field text and (to_bases) input system

        Returns:
            Success whose value is a str (to_roman, to_words), an int
            (from_roman, from_words) or a BaseRepresentation (to_bases);
            otherwise a Failure
        """
        text = request.input
        if not text.strip():
            return failure(ErrorKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

        mode = request.mode
        if mode is ConversionMode.TO_ROMAN:
            result = self._to_roman(text)
        elif mode is ConversionMode.FROM_ROMAN:
            result = self.roman.decode(text)
        elif mode is ConversionMode.TO_WORDS:
            result = self._to_words(text)
        elif mode is ConversionMode.FROM_WORDS:
            result = self.words.decode(text)
        elif mode is ConversionMode.TO_BASES:
            result = self.bases.convert(text, request.number_system)
        else:
            raise ValueError(f"Unsupported conversion mode: {mode}")

        if not result.ok:
            logger.debug("%s failed for %r: %s", mode.value, text, result.message)
        return result

    def apply_bitwise(self, request: BitwiseRequest) -> ConversionResult:
        return self.bases.apply_bitwise(
            request.operation,
            request.operand1,
            request.operand2,
            request.shift_amount,
        )

    def _to_roman(self, text: str) -> ConversionResult:
        parsed = parse_leading_integer(text)
        if not parsed.ok:
            return parsed

        result = self.roman.encode(parsed.value)
        if self.config.roman_lowercase:
            return result.map(str.lower)
        return result

    def _to_words(self, text: str) -> ConversionResult:
        parsed = parse_rounded_integer(text, self.config.words_limit)
        if not parsed.ok:
            return parsed
        return self.words.encode(parsed.value)

    # -------------------------------------------------------------------------
    # Payload API
    # -------------------------------------------------------------------------

    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a conversion_request payload into a conversion_response dict."""
        rejected = self._check_contract(self._request_validator, payload)
        if rejected is not None:
            return self._respond(rejected)

        try:
            request = ConversionRequest.model_validate(payload)
        except ValidationError as e:
            return self._respond(self._invalid_payload(e))

        return self._respond(self.convert(request))

    def handle_bitwise(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a bitwise_request payload and return a conversion_response dict."""
        rejected = self._check_contract(self._bitwise_validator, payload)
        if rejected is not None:
            return self._respond(rejected)

        try:
            request = BitwiseRequest.model_validate(payload)
        except ValidationError as e:
            return self._respond(self._invalid_payload(e))

        return self._respond(self.apply_bitwise(request))

    def _check_contract(self, validator, payload: Dict[str, Any]):
        if validator is None:
            return None

        first = validator.first_error(payload)
        if first is None:
            return None

        where = ".".join(str(p) for p in first.path) or validator.schema_name
        logger.debug("Payload rejected by %s: %s", validator.schema_name, first.message)
        return failure(ErrorKind.INVALID_FORMAT, f"Invalid request ({where}): {first.message}")

    @staticmethod
    def _invalid_payload(error: ValidationError):
        first = error.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or "request"
        return failure(ErrorKind.INVALID_FORMAT, f"Invalid request ({where}): {first['msg']}")

    def _respond(self, result: ConversionResult) -> Dict[str, Any]:
        response = ConversionResponse.from_result(result).model_dump(mode="json")
        if self.config.validate_contracts:
            try:
                validate_conversion_response(response)
            except ContractViolation:
                logger.error("Response violates conversion_response contract: %r", response)
                raise
        return response
