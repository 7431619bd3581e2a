"""Scalars modulo a small group order, used for exhaustive testing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["LowScalar"]


@dataclass(frozen=True)
class LowScalar:
    """An integer modulo a small order that fits in 32 bits."""

    value: int
    order: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or not isinstance(self.order, int):
            raise TypeError("value and order must be integers")
        if not 1 < self.order < (1 << 32):
            raise ValueError("order must be between 2 and 2**32 - 1")
        object.__setattr__(self, "value", self.value % self.order)

    @classmethod
    def from_bytes(cls, data: bytes, order: int) -> LowScalar:
        """Reduce 32 big-endian bytes modulo ``order``; overflow is never reported."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError("scalar encoding must be 32 bytes")
        return cls(int.from_bytes(data, "big"), order)

    def to_bytes(self) -> bytes:
        """Encode as 32 big-endian bytes, the value occupying the last four."""
        return self.value.to_bytes(32, "big")

    def __int__(self) -> int:
        return self.value

    def _coerce(self, other: object) -> LowScalar | None:
        if isinstance(other, LowScalar):
            if other.order != self.order:
                raise ValueError("scalars have different orders")
            return other
        if isinstance(other, int):
            return LowScalar(other, self.order)
        return None

    def _with(self, value: int) -> LowScalar:
        return LowScalar(value, self.order)

    def __add__(self, other: object) -> LowScalar:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._with(self.value + rhs.value)

    __radd__ = __add__

    def __mul__(self, other: object) -> LowScalar:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._with(self.value * rhs.value)

    __rmul__ = __mul__

    def __neg__(self) -> LowScalar:
        return self._with(-self.value)

    def square(self) -> LowScalar:
        return self._with(self.value * self.value)

    def inverse(self) -> LowScalar:
        """Find the inverse by search; raise ValueError if there is none."""
        for candidate in range(self.order):
            if candidate * self.value % self.order == 1:
                return self._with(candidate)
        raise ValueError("scalar is not invertible modulo the order")

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def is_even(self) -> bool:
        return not self.value & 1

    def is_high(self) -> bool:
        return self.value > self.order // 2

    def cond_negate(self, flag: bool) -> tuple[LowScalar, int]:
        """Negate when ``flag`` is set; return the result and -1 or 1 accordingly."""
        if flag:
            return -self, -1
        return self, 1

    def shr_int(self, n: int) -> tuple[int, LowScalar]:
        """Shift right by ``n`` (1 to 15) bits; return the bits shifted out and the result."""
        if not 0 < n < 16:
            raise ValueError("shift must be between 1 and 15")
        return self.value & ((1 << n) - 1), self._with(self.value >> n)

    def cadd_bit(self, bit: int, flag: bool) -> LowScalar:
        """Add ``2**bit`` when ``flag`` is set and ``bit`` is below 32."""
        if not flag or bit >= 32:
            return self
        total = self.value + (1 << bit)
        if total >= self.order:
            raise ValueError("conditional add overflows the order")
        return self._with(total)

    def get_bits(self, offset: int, count: int) -> int:
        """Return ``count`` bits starting at ``offset``; zero beyond bit 31."""
        if offset < 0 or count < 0:
            raise ValueError("offset and count must not be negative")
        if offset >= 32:
            return 0
        return (self.value >> offset) & ((1 << count) - 1)

    def split_128(self) -> tuple[LowScalar, LowScalar]:
        """Return the scalar itself and zero."""
        return self, self._with(0)

    def split_lambda(self, lam: int) -> tuple[LowScalar, LowScalar]:
        """Return ``(r1, r2)`` with ``r1 + lam * r2 == self`` and ``r2 = self + 5``."""
        r2 = (self.value + 5) % self.order
        r1 = self.value + (self.order - r2) * lam
        return self._with(r1), self._with(r2)