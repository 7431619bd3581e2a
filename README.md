# secpcurve

Pure-Python building blocks for arithmetic around the secp256k1 elliptic curve.

## What is inside

- `secpcurve.hashing`: streaming `Sha256` and `HmacSha256` classes, each with
  `update(data)` and `digest()`. It also has `Rfc6979HmacSha256`, the RFC 6979
  deterministic generator, with `generate(outlen)` and `finalize()`, and the
  one-shot helpers `sha256(data)` and `hmac_sha256(key, data)`.
- `secpcurve.testrand`: `TestRng`, a reproducible generator seeded with exactly
  16 bytes. It offers `rand32()`, `rand_bits(bits)`, `rand_int(limit)` and
  `rand256()`. It also has `rand_bytes_test(length)` and `rand256_test()`, which
  produce bytes made of long runs of equal bits.
- `secpcurve.field5x52`: the field prime `P` and the 5×52-bit limb kernels
  `to_limbs`, `from_limbs`, `mul_inner` and `sqr_inner`. The kernels multiply or
  square modulo `P`. The result is congruent to the true value but may not be
  fully reduced.
- `secpcurve.scalar`: the group order `N`, the endomorphism eigenvalue `LAMBDA`,
  and the immutable `Scalar` type. `Scalar` supports `+`, `*`, unary `-`,
  `square`, `inverse` and `inverse_var`. It has the predicates `is_zero`,
  `is_one`, `is_even` and `is_high`. Its bit helpers are `shr_int`, `cadd_bit`
  and `get_bits`. It also provides `mul_shift`, `split_128`, and the
  endomorphism split `split_lambda`, which returns `(r1, r2)` with
  `r1 + LAMBDA * r2 == self`. `Scalar.from_bytes` returns the reduced scalar
  together with a flag that tells whether the input overflowed.
- `secpcurve.scalar_low`: `LowScalar`, the same kind of interface over a small
  order below 2**32, for exhaustive checks. Its `split_lambda(lam)` takes the
  eigenvalue as an argument.

## Example

```python
from secpcurve.hashing import sha256, Rfc6979HmacSha256
from secpcurve.scalar import Scalar, LAMBDA
from secpcurve.testrand import TestRng

digest = sha256(b"abc")

rng = Rfc6979HmacSha256(b"placeholder")
nonce = rng.generate(32)
rng.finalize()

k, overflowed = Scalar.from_bytes(digest)
r1, r2 = k.split_lambda()
assert r1 + r2 * LAMBDA == k

test_rng = TestRng(bytes(range(16)))
value = test_rng.rand_int(1000)
```

## What it does not do

The package stops at hashing, limb kernels and scalar arithmetic. It has no
field-element type beyond the raw limb functions, and no curve point types. It
offers no point multiplication, signing or verification, and no benchmark
command.

## Testing

```
pip install -e .[test]
pytest
```