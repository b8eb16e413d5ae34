from __future__ import annotations

import pytest

from pg_replicate.domain.enums.pg_type import PgType
from pg_replicate.domain.exceptions.base import DomainError
from pg_replicate.domain.exceptions.conversions import (
    BufferTooShort,
    InvalidDigitGroup,
    InvalidNumericSign,
    NumericConversionError,
    UnsupportedColumnType,
    UnsupportedNumericValue,
)


@pytest.mark.parametrize(
    ("exc", "code"),
    [
        (BufferTooShort(needed=2, remaining=0, offset=8), "BUFFER_TOO_SHORT"),
        (InvalidNumericSign(0x8000), "INVALID_NUMERIC_SIGN"),
        (InvalidDigitGroup(index=0, raw_value=10000), "INVALID_DIGIT_GROUP"),
        (UnsupportedNumericValue(), "UNSUPPORTED_NUMERIC_VALUE"),
    ],
)
def test_numeric_errors_share_base_and_have_stable_codes(exc: DomainError, code: str) -> None:
    assert isinstance(exc, NumericConversionError)
    assert isinstance(exc, DomainError)
    assert exc.code == code


def test_invalid_sign_message_shows_hex() -> None:
    assert "0x8000" in str(InvalidNumericSign(0x8000))


def test_unsupported_column_type_is_not_a_numeric_error() -> None:
    exc = UnsupportedColumnType(PgType.TEXT)

    assert not isinstance(exc, NumericConversionError)
    assert exc.pg_type == 25
    assert exc.details == {"pg_type": 25}
