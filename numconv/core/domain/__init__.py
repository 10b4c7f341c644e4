"""
Domain models and value objects.

Contains the conversion result sum type and the request/response models
exchanged with the converter facade.
"""

from numconv.core.domain.request import (
    BaseRepresentation,
    BitwiseOperation,
    BitwiseRequest,
    ConversionMode,
    ConversionRequest,
    ConversionResponse,
    NumberSystem,
)
from numconv.core.domain.result import (
    ConversionError,
    ConversionResult,
    ErrorKind,
    Failure,
    Success,
    failure,
    success,
)

__all__ = [
    # Result module
    "ConversionError",
    "ConversionResult",
    "ErrorKind",
    "Failure",
    "Success",
    "failure",
    "success",
    # Request/response models
    "BaseRepresentation",
    "BitwiseOperation",
    "BitwiseRequest",
    "ConversionMode",
    "ConversionRequest",
    "ConversionResponse",
    "NumberSystem",
]
