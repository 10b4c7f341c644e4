"""
Conversion request/response models

Immutable Pydantic models for the payloads exchanged with the converter
facade. Full compatibility with the JSON Schema contracts in
numconv/core/contracts/schema/.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .result import ConversionResult, ErrorKind, Failure


# =============================================================================
# ENUMS
# =============================================================================


class ConversionMode(str, Enum):
    """Direction toggle of a single-field converter."""

    TO_ROMAN = "to_roman"
    FROM_ROMAN = "from_roman"
    TO_WORDS = "to_words"
    FROM_WORDS = "from_words"
    TO_BASES = "to_bases"


class NumberSystem(str, Enum):
    """Input system of the base converter."""

    BINARY = "binary"
    DECIMAL = "decimal"
    HEXADECIMAL = "hexadecimal"
    OCTAL = "octal"
    TEXT = "text"


class BitwiseOperation(str, Enum):
    """Operation applied to binary operands."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NOT = "NOT"
    LEFT_SHIFT = "LEFT_SHIFT"
    RIGHT_SHIFT = "RIGHT_SHIFT"


# =============================================================================
# VALUE MODELS
# =============================================================================


class BaseRepresentation(BaseModel):
    """
    One integer rendered in every supported number system.

    For text input only `binary` and `text` are filled; the numeric fields
    stay empty strings.
    """

    binary: str = Field(..., description="Base-2 digits, or space-separated bytes for text")
    decimal: str = Field("", description="Base-10 digits")
    hexadecimal: str = Field("", description="Base-16 digits, uppercase")
    octal: str = Field("", description="Base-8 digits")
    text: Optional[str] = Field(None, description="Source text for text input")

    model_config = {"frozen": True}


# =============================================================================
# REQUEST MODELS
# =============================================================================


class ConversionRequest(BaseModel):
    """A single form field plus the mode toggle."""

    mode: ConversionMode = Field(..., description="Conversion direction")
    input: str = Field(..., max_length=1024, description="Raw field text as typed")
    number_system: NumberSystem = Field(
        NumberSystem.DECIMAL, description="Input system, used by to_bases only"
    )

    model_config = {"frozen": True}


class BitwiseRequest(BaseModel):
    """Operands of a bitwise operation, as typed."""

    operation: BitwiseOperation = Field(..., description="Bitwise operation")
    operand1: str = Field(..., max_length=1024, description="First operand (binary)")
    operand2: str = Field("", max_length=1024, description="Second operand (binary)")
    shift_amount: str = Field("1", max_length=32, description="Shift distance")

    model_config = {"frozen": True}


# =============================================================================
# RESPONSE MODEL
# =============================================================================


class ConversionResponse(BaseModel):
    """
    Display-ready outcome of a conversion.

    Exactly one of (value/bases) or (error_kind, message) is populated,
    depending on `ok`.
    """

    ok: bool = Field(..., description="Whether the conversion succeeded")
    value: Optional[str] = Field(None, description="Converted value as displayed")
    bases: Optional[BaseRepresentation] = Field(
        None, description="Multi-base rendering for base conversions"
    )
    error_kind: Optional[ErrorKind] = Field(None, description="Failure kind")
    message: Optional[str] = Field(
        None, validate_default=True, description="Human-readable failure message"
    )

    model_config = {"frozen": True}

    @field_validator("message")
    @classmethod
    def validate_message_on_failure(cls, v: Optional[str], info) -> Optional[str]:
        """A failed response must say why."""
        if info.data.get("ok") is False and not v:
            raise ValueError("message is required when ok is false")
        return v

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionResponse":
        if isinstance(result, Failure):
            return cls(ok=False, error_kind=result.kind, message=result.message)

        value = result.value
        if isinstance(value, BaseRepresentation):
            return cls(ok=True, bases=value)
        return cls(ok=True, value=str(value))
