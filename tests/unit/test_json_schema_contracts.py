"""
Tests for JSON Schema Contract Validators

Covers:
- Validity of the bundled schemas
- Acceptance of valid payloads
- Detection of missing required fields, bad enums, extra fields, max lengths
- Consistency with the Pydantic response model
"""

import json

import pytest
from jsonschema import ValidationError

from numconv.core.contracts import (
    CONTRACT_NAMES,
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_conversion_response,
)
from numconv.core.domain import ConversionResponse, ErrorKind, failure, success


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    def test_loads_bundled_schemas(self):
        loader = SchemaLoader()
        for name in ("conversion_request", "bitwise_request", "conversion_response"):
            schema = loader.load_schema(name)
            assert schema["title"] == name

    def test_cache(self):
        loader = SchemaLoader()
        assert loader.load_schema("conversion_request") is loader.load_schema("conversion_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALIDATOR FACTORY
# =============================================================================


class TestContractValidatorFactory:
    def test_shared_instance(self):
        for name in CONTRACT_NAMES:
            assert contract_validator(name) is contract_validator(name)
            assert contract_validator(name).schema_name == name

    def test_unknown_contract(self):
        with pytest.raises(ValueError, match="Unknown contract"):
            contract_validator("does_not_exist")

    def test_custom_loader(self, tmp_path):
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
        (tmp_path / "anything.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = ContractValidator("anything", SchemaLoader(tmp_path))
        assert validator.is_valid({})
        assert not validator.is_valid([])

    def test_first_error(self):
        validator = contract_validator("conversion_request")
        assert validator.first_error({"mode": "to_words", "input": "1"}) is None

        missing = validator.first_error({"input": 5})
        assert list(missing.path) == []
        assert "'mode' is a required property" in missing.message

        bad_mode = validator.first_error({"mode": "sideways", "input": "1"})
        assert list(bad_mode.path) == ["mode"]


# =============================================================================
# REQUEST CONTRACTS
# =============================================================================


class TestConversionRequestContract:
    @pytest.fixture
    def validator(self):
        return contract_validator("conversion_request")

    def test_valid(self, validator):
        validator.validate({"mode": "to_words", "input": "42"})
        validator.validate(
            {"mode": "to_bases", "input": "ff", "number_system": "hexadecimal"}
        )

    def test_missing_required(self, validator):
        with pytest.raises(ValidationError):
            validator.validate({"input": "42"})

    def test_bad_enum(self, validator):
        with pytest.raises(ValidationError):
            validator.validate({"mode": "to_klingon", "input": "42"})
        with pytest.raises(ValidationError):
            validator.validate(
                {"mode": "to_bases", "input": "1", "number_system": "base64"}
            )

    def test_extra_field(self, validator):
        assert not validator.is_valid(
            {"mode": "to_words", "input": "42", "locale": "en"}
        )

    def test_max_length(self, validator):
        assert not validator.is_valid(
            {"mode": "from_words", "input": "one " * 300}
        )

    def test_iter_errors(self, validator):
        errors = list(validator.iter_errors({"input": 5}))
        assert len(errors) == 2  # missing mode, input not a string


class TestBitwiseRequestContract:
    @pytest.fixture
    def validator(self):
        return contract_validator("bitwise_request")

    def test_valid(self, validator):
        validator.validate({"operation": "NOT", "operand1": "101"})
        assert validator.is_valid(
            {"operation": "AND", "operand1": "1", "operand2": "0", "shift_amount": "1"}
        )

    def test_invalid(self, validator):
        with pytest.raises(ValidationError):
            validator.validate({"operation": "NAND", "operand1": "1"})
        with pytest.raises(ValidationError):
            validator.validate({"operation": "AND"})


# =============================================================================
# RESPONSE CONTRACT
# =============================================================================


class TestConversionResponseContract:
    def test_minimal_success(self):
        validate_conversion_response({"ok": True})

    def test_failure_needs_message(self):
        with pytest.raises(ValidationError):
            validate_conversion_response({"ok": False, "error_kind": "OUT_OF_RANGE"})
        with pytest.raises(ValidationError):
            validate_conversion_response({"ok": False, "error_kind": "OUT_OF_RANGE", "message": ""})

    def test_unknown_error_kind(self):
        assert not contract_validator("conversion_response").is_valid(
            {"ok": False, "error_kind": "KABOOM", "message": "x"}
        )

    def test_pydantic_dumps_conform(self):
        for result in (
            success(7),
            success("vii"),
            failure(ErrorKind.EMPTY_INPUT, "Please enter a value to convert"),
        ):
            dumped = ConversionResponse.from_result(result).model_dump(mode="json")
            validate_conversion_response(dumped)
