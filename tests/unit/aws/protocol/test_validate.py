import pytest

from awswire.aws.api import InvalidArgument
from awswire.aws.protocol.validate import (
    InvalidLength,
    InvalidRange,
    InvalidType,
    MissingRequiredField,
    ParameterValidationError,
    UnknownField,
    ValidationErrors,
    validate_request,
)
from awswire.aws.spec import get_operation_model


def _validate(service: str, operation: str, params: dict):
    return validate_request(get_operation_model(service, operation), params)


def test_valid_request():
    errors = _validate("kms", "Decrypt", {"CiphertextBlob": b"data", "GrantTokens": ["token"]})

    assert not errors.has_errors()
    errors.raise_first()


def test_missing_required_field():
    errors = _validate("kms", "Decrypt", {})

    with pytest.raises(MissingRequiredField) as e:
        errors.raise_first()

    assert e.value.required_name == "CiphertextBlob"
    assert e.value.reason == "missing required field"
    assert isinstance(e.value, InvalidArgument)


def test_required_field_set_to_none():
    params = {"CiphertextBlob": None}

    with pytest.raises(MissingRequiredField):
        _validate("kms", "Decrypt", params).raise_first()

    # the request itself is not modified
    assert params == {"CiphertextBlob": None}


def test_optional_field_set_to_none():
    assert not _validate("kms", "Decrypt", {"CiphertextBlob": b"data", "KeyId": None}).has_errors()


def test_unknown_field():
    with pytest.raises(UnknownField) as e:
        _validate("kms", "ListKeys", {"Foo": "bar"}).raise_first()

    assert e.value.unknown_param == "Foo"


def test_invalid_type():
    with pytest.raises(InvalidType):
        _validate("kms", "ListKeys", {"Limit": "ten"}).raise_first()


def test_invalid_range():
    with pytest.raises(InvalidRange):
        _validate("kms", "ListKeys", {"Limit": 0}).raise_first()


def test_invalid_length():
    with pytest.raises(InvalidLength):
        _validate("iot", "DescribeThing", {"thingName": ""}).raise_first()


def test_all_errors_are_collected():
    errors = _validate("cognito-sync", "RegisterDevice", {"IdentityPoolId": "pool"})

    missing = {e.required_name for e in errors.exceptions if isinstance(e, MissingRequiredField)}
    assert missing == {"IdentityId", "Platform", "Token"}
    assert all(isinstance(e, ParameterValidationError) for e in errors.exceptions)
    assert "Missing required parameter" in errors.generate_report()


def test_error_message():
    with pytest.raises(InvalidRange) as e:
        _validate("kms", "ListKeys", {"Limit": 0}).raise_first()

    assert e.value.message == str(e.value)
    assert "Invalid value for parameter Limit" in e.value.message


def test_unexpected_reason():
    shape = get_operation_model("kms", "ListKeys").input_shape
    errors = ValidationErrors(shape, {})

    errors.report("Limit", "empty input", members=["Limit"])

    assert errors.has_errors()
    assert type(errors.exceptions[0]) is ParameterValidationError
    assert errors.exceptions[0].reason == "empty input"
