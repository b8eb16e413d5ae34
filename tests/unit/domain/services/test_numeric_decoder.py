from __future__ import annotations

import pytest

from pg_replicate.domain.entities.pg_numeric import (
    PgNumericNaN,
    PgNumericNegative,
    PgNumericPositive,
)
from pg_replicate.domain.exceptions.conversions import (
    BufferTooShort,
    InvalidDigitGroup,
    InvalidNumericSign,
)
from pg_replicate.domain.services.numeric_decoder import (
    NUMERIC_NAN,
    NUMERIC_NEG,
    NUMERIC_POS,
    decode_numeric,
)


def test_decodes_positive(pack_numeric) -> None:
    raw = pack_numeric([1234], weight=0, sign=NUMERIC_POS, scale=0)

    assert decode_numeric(raw) == PgNumericPositive(weight=0, scale=0, digits=(1234,))


def test_decodes_negative_with_weight_and_scale(pack_numeric) -> None:
    raw = pack_numeric([12, 3400], weight=0, sign=NUMERIC_NEG, scale=2)

    assert decode_numeric(raw) == PgNumericNegative(weight=0, scale=2, digits=(12, 3400))


def test_decodes_negative_weight(pack_numeric) -> None:
    numeric = decode_numeric(pack_numeric([1234], weight=-1, scale=4))

    assert isinstance(numeric, PgNumericPositive)
    assert numeric.weight == -1
    assert numeric.scale == 4


def test_decodes_nan(pack_numeric) -> None:
    assert decode_numeric(pack_numeric(sign=NUMERIC_NAN)) == PgNumericNaN()


def test_nan_ignores_weight_and_scale(pack_numeric) -> None:
    raw = pack_numeric([5, 6], weight=-7, sign=NUMERIC_NAN, scale=99)

    assert isinstance(decode_numeric(raw), PgNumericNaN)


def test_zero_has_no_digits(pack_numeric) -> None:
    assert decode_numeric(pack_numeric()) == PgNumericPositive(weight=0, scale=0, digits=())


def test_scale_is_unsigned_and_weight_is_signed(pack_numeric) -> None:
    numeric = decode_numeric(pack_numeric([1], weight=-32768, scale=0xFFFF))

    assert isinstance(numeric, PgNumericPositive)
    assert numeric.weight == -32768
    assert numeric.scale == 0xFFFF


@pytest.mark.parametrize("sign", [0x8000, 0x0001, 0xD000, 0xF000, 0xFFFF])
def test_invalid_sign_carries_raw_value(pack_numeric, sign: int) -> None:
    with pytest.raises(InvalidNumericSign) as excinfo:
        decode_numeric(pack_numeric([1], sign=sign))

    assert excinfo.value.raw_value == sign
    assert excinfo.value.details == {"raw_value": sign}


@pytest.mark.parametrize("size", range(8))
def test_header_shorter_than_eight_bytes(pack_numeric, size: int) -> None:
    raw = pack_numeric([1234])[:size]

    with pytest.raises(BufferTooShort):
        decode_numeric(raw)


def test_digit_count_exceeding_buffer(pack_numeric) -> None:
    raw = pack_numeric([1, 2], ndigits=3)

    with pytest.raises(BufferTooShort) as excinfo:
        decode_numeric(raw)

    assert excinfo.value.offset == 12
    assert excinfo.value.remaining == 0


def test_truncated_digit_group(pack_numeric) -> None:
    raw = pack_numeric([1234, 5678])[:-1]

    with pytest.raises(BufferTooShort):
        decode_numeric(raw)


def test_truncated_buffer_reported_before_sign(pack_numeric) -> None:
    raw = pack_numeric([1], sign=0x8000, ndigits=2)

    with pytest.raises(BufferTooShort):
        decode_numeric(raw)


def test_trailing_bytes_are_ignored(pack_numeric) -> None:
    raw = pack_numeric([42]) + b"\xde\xad"

    assert decode_numeric(raw) == PgNumericPositive(weight=0, scale=0, digits=(42,))


def test_digit_group_out_of_range(pack_numeric) -> None:
    with pytest.raises(InvalidDigitGroup) as excinfo:
        decode_numeric(pack_numeric([1, 10000]))

    assert excinfo.value.index == 1
    assert excinfo.value.raw_value == 10000


def test_many_digit_groups(pack_numeric) -> None:
    digits = [9999] * 1000
    numeric = decode_numeric(pack_numeric(digits, weight=999))

    assert isinstance(numeric, PgNumericPositive)
    assert len(numeric.digits) == 1000
