import pytest
from sqlalchemy.exc import IntegrityError

from application.utils.utils import get_error_status, parse_number, to_http_exception
from domain.exceptions import CastError, DuplicateKeyError, ValidationError
from infrastructure.config import parse_cors_origins


@pytest.mark.parametrize("value, expected", [(None, 3), ("", 3), ("0", 0), ("12", 12), (" 7 ", 7)])
def test_parse_number(value, expected):
    assert parse_number("page", value, 3) == expected


@pytest.mark.parametrize("value", ["-1", "abc", "1e3", "2.0", "²", "٣", "9223372036854775808", "9" * 5000])
def test_parse_number_rejects_non_integers(value):
    with pytest.raises(ValidationError, match="is invalid, it must be a positive integer"):
        parse_number("page", value)


def test_parse_number_accepts_largest_64_bit_value():
    assert parse_number("size", str(2**63 - 1)) == 2**63 - 1


@pytest.mark.parametrize("error", [
    ValidationError("bad"),
    CastError("unit", "x", "Integer"),
    DuplicateKeyError("cnpj", "1"),
    IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed")),
])
def test_client_errors_map_to_400(error):
    assert get_error_status(error) == 400


def test_unexpected_errors_map_to_500_with_generic_message():
    exc = to_http_exception(RuntimeError("connection lost"))
    assert exc.status_code == 500
    assert exc.detail == "[ERROR] Internal server error"


def test_client_error_message_is_prefixed():
    exc = to_http_exception(ValidationError("Unit validation failed: name: Path `name` is required."))
    assert exc.status_code == 400
    assert exc.detail == "[ERROR] Unit validation failed: name: Path `name` is required."


@pytest.mark.parametrize("value, expected", [
    ("", []),
    ("*", ["*"]),
    ("http://a.com, http://b.com,", ["http://a.com", "http://b.com"]),
])
def test_parse_cors_origins(value, expected):
    assert parse_cors_origins(value) == expected
