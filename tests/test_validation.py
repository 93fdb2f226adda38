import pytest

from wallarmrules.validation import (
    ValidationError,
    validate_in,
    validate_positive,
    validate_range,
)


def test_positive_accepts_positive_value():
    assert validate_positive("client_id", 5) == 5


@pytest.mark.parametrize("value", [0, -3])
def test_positive_rejects_non_positive(value):
    with pytest.raises(ValidationError, match="client_id"):
        validate_positive("client_id", value)


def test_positive_message_is_fixed():
    with pytest.raises(ValidationError) as info:
        validate_positive("client_id", 0)
    assert str(info.value) == '"client_id" must be positive, got: 0'


def test_positive_rejects_non_integer():
    with pytest.raises(ValidationError):
        validate_positive("client_id", "7")


def test_in_accepts_member():
    assert validate_in("method", "GET", ["GET", "POST"], False) == "GET"


def test_in_is_case_sensitive_by_default():
    with pytest.raises(ValidationError, match="method"):
        validate_in("method", "get", ["GET", "POST"], False)


def test_in_ignores_case_when_asked():
    assert validate_in("scheme", "HTTPS", ["http", "https"], True) == "HTTPS"


def test_in_rejects_non_string():
    with pytest.raises(ValidationError):
        validate_in("scheme", 1, ["http", "https"], True)


@pytest.mark.parametrize("value", [0, 5, 10])
def test_range_accepts_inclusive_bounds(value):
    assert validate_range("pii_weight", value, 0, 10) == value


@pytest.mark.parametrize("value", [-1, 11])
def test_range_rejects_outside(value):
    with pytest.raises(ValidationError, match="pii_weight"):
        validate_range("pii_weight", value, 0, 10)


def test_range_without_upper_bound():
    assert validate_range("max_lom_size", 1025, 1025, None) == 1025
    assert validate_range("max_lom_size", 10**9, 1025, None) == 10**9
    with pytest.raises(ValidationError):
        validate_range("max_lom_size", 1024, 1025, None)


def test_range_rejects_bool():
    with pytest.raises(ValidationError):
        validate_range("pii_weight", True, 0, 10)