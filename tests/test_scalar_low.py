import pytest
from hypothesis import given
from hypothesis import strategies as st

from secpcurve.scalar_low import LowScalar

ORDER = 13
LAM = 9

values = st.integers(min_value=0, max_value=ORDER - 1)
elements = values.map(lambda v: LowScalar(v, ORDER))


def test_lambda_is_cube_root_of_one():
    lam = LowScalar(LAM, ORDER)
    assert (lam * lam * lam).is_one()


@given(st.binary(min_size=32, max_size=32))
def test_from_bytes_reduces(data):
    s = LowScalar.from_bytes(data, ORDER)
    assert s.value == int.from_bytes(data, "big") % ORDER


def test_from_bytes_rejects_length():
    with pytest.raises(ValueError):
        LowScalar.from_bytes(b"\x01" * 33, ORDER)


def test_to_bytes_layout():
    s = LowScalar(0x01020304, 0xFFFFFFFB)
    assert s.to_bytes() == bytes(28) + b"\x01\x02\x03\x04"


@given(elements)
def test_bytes_round_trip(s):
    assert LowScalar.from_bytes(s.to_bytes(), ORDER) == s


@given(values, values)
def test_add_and_mul_commute(x, y):
    a, b = LowScalar(x, ORDER), LowScalar(y, ORDER)
    assert a + b == b + a
    assert a * b == b * a
    assert (a + b).value == (x + y) % ORDER
    assert (a * b).value == (x * y) % ORDER


@given(values)
def test_negation(x):
    a = LowScalar(x, ORDER)
    assert (a + (-a)).is_zero()


@given(values)
def test_square(x):
    a = LowScalar(x, ORDER)
    assert a.square() == a * a


def test_inverse_all_nonzero():
    for v in range(1, ORDER):
        s = LowScalar(v, ORDER)
        assert (s * s.inverse()).is_one()


def test_inverse_not_invertible():
    with pytest.raises(ValueError):
        LowScalar(2, 4).inverse()
    with pytest.raises(ValueError):
        LowScalar(0, ORDER).inverse()


def test_mixed_orders_rejected():
    with pytest.raises(ValueError):
        LowScalar(1, ORDER) + LowScalar(1, 7)


def test_is_high():
    assert not LowScalar(ORDER // 2, ORDER).is_high()
    assert LowScalar(ORDER // 2 + 1, ORDER).is_high()


@given(values)
def test_cond_negate(x):
    a = LowScalar(x, ORDER)
    assert a.cond_negate(True) == (-a, -1)
    assert a.cond_negate(False) == (a, 1)


@given(values, st.integers(min_value=1, max_value=15))
def test_shr_int(x, n):
    low, rest = LowScalar(x, ORDER).shr_int(n)
    assert low + (rest.value << n) == x


def test_shr_int_bad_shift():
    with pytest.raises(ValueError):
        LowScalar(3, ORDER).shr_int(16)


def test_cadd_bit():
    assert LowScalar(1, ORDER).cadd_bit(2, True) == LowScalar(5, ORDER)
    assert LowScalar(1, ORDER).cadd_bit(2, False) == LowScalar(1, ORDER)
    assert LowScalar(1, ORDER).cadd_bit(40, True) == LowScalar(1, ORDER)
    with pytest.raises(ValueError):
        LowScalar(12, ORDER).cadd_bit(0, True)


def test_get_bits():
    s = LowScalar(0b1011, ORDER)
    assert s.get_bits(1, 2) == 0b01
    assert s.get_bits(32, 4) == 0


@given(values)
def test_split_128(x):
    r1, r2 = LowScalar(x, ORDER).split_128()
    assert r1 == LowScalar(x, ORDER)
    assert r2.is_zero()


@given(values)
def test_split_lambda(x):
    a = LowScalar(x, ORDER)
    r1, r2 = a.split_lambda(LAM)
    assert r1 + r2 * LAM == a
    assert r2 == LowScalar((x + 5) % ORDER, ORDER)