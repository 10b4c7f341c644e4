"""
Contract Validation Module

Validates converter request/response payloads against JSON Schema contracts.
"""

from .validators import (
    CONTRACT_NAMES,
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_conversion_response,
)

__all__ = [
    # Constants
    "CONTRACT_NAMES",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "contract_validator",
    "validate_conversion_response",
]
