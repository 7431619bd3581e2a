"""Limb arithmetic for field elements held as five 52-bit limbs.

A value is represented as ``sum(limbs[i] << (52 * i))``. Multiplication and
squaring reduce modulo the field prime using ``2**256 = 0x1000003D1 (mod p)``,
producing limbs of at most 52 bits (the top limb at most 49 bits). The
result is congruent to the product but not necessarily fully reduced.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["P", "to_limbs", "from_limbs", "mul_inner", "sqr_inner"]

P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
"""The secp256k1 field prime."""

_M = 0xFFFFFFFFFFFFF
_R = 0x1000003D10
_LIMB_BITS = (56, 56, 56, 56, 52)


def to_limbs(value: int) -> tuple[int, int, int, int, int]:
    """Split a 256-bit non-negative integer into five limbs (52 bits, top 48)."""
    if not 0 <= value < 1 << 256:
        raise ValueError("value must be a non-negative 256-bit integer")
    return (
        value & _M,
        (value >> 52) & _M,
        (value >> 104) & _M,
        (value >> 156) & _M,
        value >> 208,
    )


def from_limbs(limbs: Sequence[int]) -> int:
    """Recombine five limbs into the integer they stand for (not reduced)."""
    if len(limbs) != 5:
        raise ValueError("exactly five limbs are required")
    return sum(limb << (52 * i) for i, limb in enumerate(limbs))


def _check(limbs: Sequence[int]) -> tuple[int, int, int, int, int]:
    if len(limbs) != 5:
        raise ValueError("exactly five limbs are required")
    for limb, bits in zip(limbs, _LIMB_BITS):
        if limb < 0 or limb >> bits:
            raise ValueError(f"limb {limb:#x} does not fit in {bits} bits")
    return tuple(limbs)  # type: ignore[return-value]


def mul_inner(a: Sequence[int], b: Sequence[int]) -> tuple[int, int, int, int, int]:
    """Multiply two limb vectors modulo the field prime."""
    a0, a1, a2, a3, a4 = _check(a)
    b0, b1, b2, b3, b4 = _check(b)

    d = a0 * b3 + a1 * b2 + a2 * b1 + a3 * b0
    c = a4 * b4
    d += (c & _M) * _R
    c >>= 52
    t3 = d & _M
    d >>= 52

    d += a0 * b4 + a1 * b3 + a2 * b2 + a3 * b1 + a4 * b0
    d += c * _R
    t4 = d & _M
    d >>= 52
    tx = t4 >> 48
    t4 &= _M >> 4

    c = a0 * b0
    d += a1 * b4 + a2 * b3 + a3 * b2 + a4 * b1
    u0 = d & _M
    d >>= 52
    u0 = (u0 << 4) | tx
    c += u0 * (_R >> 4)
    r0 = c & _M
    c >>= 52

    c += a0 * b1 + a1 * b0
    d += a2 * b4 + a3 * b3 + a4 * b2
    c += (d & _M) * _R
    d >>= 52
    r1 = c & _M
    c >>= 52

    c += a0 * b2 + a1 * b1 + a2 * b0
    d += a3 * b4 + a4 * b3
    c += (d & _M) * _R
    d >>= 52
    r2 = c & _M
    c >>= 52

    c += d * _R + t3
    r3 = c & _M
    c >>= 52
    c += t4
    return (r0, r1, r2, r3, c)


def sqr_inner(a: Sequence[int]) -> tuple[int, int, int, int, int]:
    """Square a limb vector modulo the field prime."""
    a0, a1, a2, a3, a4 = _check(a)

    d = (a0 * 2) * a3 + (a1 * 2) * a2
    c = a4 * a4
    d += (c & _M) * _R
    c >>= 52
    t3 = d & _M
    d >>= 52

    a4 *= 2
    d += a0 * a4 + (a1 * 2) * a3 + a2 * a2
    d += c * _R
    t4 = d & _M
    d >>= 52
    tx = t4 >> 48
    t4 &= _M >> 4

    c = a0 * a0
    d += a1 * a4 + (a2 * 2) * a3
    u0 = d & _M
    d >>= 52
    u0 = (u0 << 4) | tx
    c += u0 * (_R >> 4)
    r0 = c & _M
    c >>= 52

    a0 *= 2
    c += a0 * a1
    d += a2 * a4 + a3 * a3
    c += (d & _M) * _R
    d >>= 52
    r1 = c & _M
    c >>= 52

    c += a0 * a2 + a1 * a1
    d += a3 * a4
    c += (d & _M) * _R
    d >>= 52
    r2 = c & _M
    c >>= 52

    c += d * _R + t3
    r3 = c & _M
    c >>= 52
    c += t4
    return (r0, r1, r2, r3, c)