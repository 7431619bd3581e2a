"""Scalars modulo the order of the secp256k1 group."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["N", "LAMBDA", "Scalar"]

N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
"""The order of the secp256k1 group."""

LAMBDA = 0x5363AD4CC05C30E0A5261C028812645A122E22EA20816678DF02967C1B23BD72
"""Eigenvalue of the curve endomorphism: lambda * (x, y) == (beta * x, y)."""

_MINUS_LAMBDA = 0xAC9C52B33FA3CF1F5AD9E3FD77ED9BA4A880B9FC8EC739C2E0CFC810B51283CF
_MINUS_B1 = 0x00000000000000000000000000000000E4437ED6010E88286F547FA90ABFE4C3
_MINUS_B2 = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE8A280AC50774346DD765CDA83DB1562C
_G1 = 0x00000000000000000000000000003086D221A7D46BCDE86C90E49284EB153DAB
_G2 = 0x0000000000000000000000000000E4437ED6010E88286F547FA90ABFE4C42212
_HALF_N = N // 2
_MASK128 = (1 << 128) - 1


@dataclass(frozen=True, order=True)
class Scalar:
    """An integer modulo the group order, always kept fully reduced."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int):
            raise TypeError("scalar value must be an integer")
        object.__setattr__(self, "value", self.value % N)

    @classmethod
    def from_bytes(cls, data: bytes) -> tuple[Scalar, bool]:
        """Parse 32 big-endian bytes; return the reduced scalar and whether it overflowed."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("scalar encoding must be 32 bytes")
        raw = int.from_bytes(data, "big")
        return cls(raw), raw >= N

    def to_bytes(self) -> bytes:
        """Encode as 32 big-endian bytes."""
        return self.value.to_bytes(32, "big")

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Scalar({self.value:#066x})"

    @staticmethod
    def _coerce(other: object) -> Scalar | None:
        if isinstance(other, Scalar):
            return other
        if isinstance(other, int):
            return Scalar(other)
        return None

    def __add__(self, other: object) -> Scalar:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self.value + rhs.value)

    __radd__ = __add__

    def __mul__(self, other: object) -> Scalar:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar(self.value * rhs.value)

    __rmul__ = __mul__

    def __neg__(self) -> Scalar:
        return Scalar(-self.value)

    def square(self) -> Scalar:
        return Scalar(self.value * self.value)

    def inverse(self) -> Scalar:
        """Modular inverse by exponentiation; the inverse of zero is zero."""
        return Scalar(pow(self.value, N - 2, N))

    def inverse_var(self) -> Scalar:
        """Modular inverse, possibly variable time; the inverse of zero is zero."""
        if self.value == 0:
            return Scalar(0)
        return Scalar(pow(self.value, -1, N))

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_even(self) -> bool:
        return not self.value & 1

    def is_high(self) -> bool:
        """Whether the scalar is greater than half the group order."""
        return self.value > _HALF_N

    def cond_negate(self, flag: bool) -> tuple[Scalar, int]:
        """Negate when ``flag`` is set; return the result and -1 or 1 accordingly."""
        if flag:
            return -self, -1
        return self, 1

    def shr_int(self, n: int) -> tuple[int, Scalar]:
        """Shift right by ``n`` (1 to 15) bits; return the bits shifted out and the result."""
        if not 0 < n < 16:
            raise ValueError("shift must be between 1 and 15")
        return self.value & ((1 << n) - 1), Scalar(self.value >> n)

    def cadd_bit(self, bit: int, flag: bool) -> Scalar:
        """Add ``2**bit`` when ``flag`` is set."""
        if not 0 <= bit < 256:
            raise ValueError("bit must be between 0 and 255")
        if flag:
            return Scalar(self.value + (1 << bit))
        return self

    def get_bits(self, offset: int, count: int) -> int:
        """Return ``count`` (1 to 32) bits starting at bit ``offset``."""
        if not 1 <= count <= 32:
            raise ValueError("count must be between 1 and 32")
        if offset < 0 or offset + count > 256:
            raise ValueError("bit range must lie within 256 bits")
        return (self.value >> offset) & ((1 << count) - 1)

    def mul_shift(self, other: Scalar, shift: int) -> Scalar:
        """Return ``round(self * other / 2**shift)``; ``shift`` must be at least 256."""
        if shift < 256:
            raise ValueError("shift must be at least 256")
        product = self.value * other.value
        return Scalar((product >> shift) + ((product >> (shift - 1)) & 1))

    def split_lambda(self) -> tuple[Scalar, Scalar]:
        """Return ``(r1, r2)`` with ``r1 + lambda * r2 == self``, both about 128 bits."""
        c1 = self.mul_shift(Scalar(_G1), 272) * _MINUS_B1
        c2 = self.mul_shift(Scalar(_G2), 272) * _MINUS_B2
        r2 = c1 + c2
        r1 = r2 * _MINUS_LAMBDA + self
        return r1, r2

    def split_128(self) -> tuple[Scalar, Scalar]:
        """Return the low and high 128-bit halves."""
        return Scalar(self.value & _MASK128), Scalar(self.value >> 128)