"""
Payload contracts for the converter

Every dict that crosses Converter.handle()/handle_bitwise() is described by a
draft 2020-12 JSON Schema shipped in schema/:

- conversion_request   mode toggle + raw field text (+ number system)
- bitwise_request      operation + binary operands (+ shift distance)
- conversion_response  display-ready outcome; a failure carries a kind and
                       a non-empty message

Schemas are meta-validated on first load. contract_validator() hands out one
shared validator per contract.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

CONTRACT_NAMES: Final[tuple[str, ...]] = (
    "conversion_request",
    "bitwise_request",
    "conversion_response",
)


# =============================================================================
# SCHEMA FILES
# =============================================================================


class SchemaLoader:
    """Reads <name>.json from a schema directory, checked and cached."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Args:
            schema_name: file stem, e.g. 'conversion_request'

        Raises:
            FileNotFoundError: no such file in the schema directory
            ValueError: the file is not a draft 2020-12 schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# VALIDATION
# =============================================================================


class ContractValidator:
    """One named contract, checked against plain dicts."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raise jsonschema.ValidationError on the first violation."""
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def first_error(self, data: Dict[str, Any]) -> Optional[ValidationError]:
        """
        The violation to report, or None for a conforming payload.

        Ordered by field path so the same payload always reports the same
        field; whole-object errors (missing fields) have an empty path and
        come first.
        """
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        return errors[0] if errors else None


@lru_cache(maxsize=None)
def contract_validator(schema_name: str) -> ContractValidator:
    """
    Shared validator for a bundled contract.

    Examples:
        >>> contract_validator("conversion_response").is_valid({"ok": True})
        True
    """
    if schema_name not in CONTRACT_NAMES:
        raise ValueError(f"Unknown contract: {schema_name}")
    return ContractValidator(schema_name)


def validate_conversion_response(data: Dict[str, Any]) -> None:
    """
    Check a response dict before it leaves the converter.

    Raises:
        ValidationError: the response violates conversion_response
    """
    contract_validator("conversion_response").validate(data)
