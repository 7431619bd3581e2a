import pytest
from hypothesis import given
from hypothesis import strategies as st

from secpcurve.field5x52 import P, from_limbs, mul_inner, sqr_inner, to_limbs

values = st.integers(min_value=0, max_value=(1 << 256) - 1)
wide_limbs = st.tuples(
    st.integers(0, (1 << 56) - 1),
    st.integers(0, (1 << 56) - 1),
    st.integers(0, (1 << 56) - 1),
    st.integers(0, (1 << 56) - 1),
    st.integers(0, (1 << 52) - 1),
)


def _check_output(limbs):
    assert len(limbs) == 5
    for limb in limbs[:4]:
        assert 0 <= limb < 1 << 52
    assert 0 <= limbs[4] < 1 << 49


def test_to_limbs_small_value():
    assert to_limbs(1) == (1, 0, 0, 0, 0)


def test_to_limbs_top_limb_width():
    limbs = to_limbs((1 << 256) - 1)
    assert limbs[4] == (1 << 48) - 1
    assert all(limb == (1 << 52) - 1 for limb in limbs[:4])


@given(values)
def test_limb_round_trip(value):
    assert from_limbs(to_limbs(value)) == value


@pytest.mark.parametrize("value", [-1, 1 << 256])
def test_to_limbs_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        to_limbs(value)


def test_from_limbs_requires_five():
    with pytest.raises(ValueError):
        from_limbs([1, 2, 3])


@given(values, values)
def test_mul_matches_modular_product(a, b):
    result = mul_inner(to_limbs(a), to_limbs(b))
    _check_output(result)
    assert from_limbs(result) % P == (a * b) % P


@given(wide_limbs, wide_limbs)
def test_mul_accepts_unnormalized_limbs(a, b):
    result = mul_inner(a, b)
    _check_output(result)
    assert from_limbs(result) % P == (from_limbs(a) * from_limbs(b)) % P


@given(wide_limbs)
def test_sqr_matches_mul(a):
    squared = sqr_inner(a)
    _check_output(squared)
    assert from_limbs(squared) % P == from_limbs(mul_inner(a, a)) % P
    assert from_limbs(squared) % P == (from_limbs(a) ** 2) % P


def test_mul_by_one_is_identity_mod_p():
    x = P - 5
    assert from_limbs(mul_inner(to_limbs(x), to_limbs(1))) % P == x


def test_mul_rejects_wide_top_limb():
    with pytest.raises(ValueError):
        mul_inner((0, 0, 0, 0, 1 << 52), to_limbs(1))


def test_sqr_rejects_negative_limb():
    with pytest.raises(ValueError):
        sqr_inner((-1, 0, 0, 0, 0))


def test_mul_rejects_wrong_length():
    with pytest.raises(ValueError):
        mul_inner((1, 2, 3, 4), to_limbs(1))