"""Deterministic pseudo-random source for tests, built on the RFC 6979 generator."""

from __future__ import annotations

from .hashing import Rfc6979HmacSha256

__all__ = ["TestRng"]

_U32 = 0xFFFFFFFF

# Indexed by the bit length of (limit - 1): extra bits drawn to reduce rejections.
_ADDBITS = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2,
    3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 3, 2, 1, 0,
)


class TestRng:
    """Seeded generator of test integers and byte strings."""

    __test__ = False  # not a pytest test class

    def __init__(self, seed16: bytes) -> None:
        seed16 = bytes(seed16)
        if len(seed16) != 16:
            raise ValueError("seed must be exactly 16 bytes")
        self._rng = Rfc6979HmacSha256(seed16)
        self._precomputed: list[int] = []
        self._integer = 0
        self._bits_left = 0

    def rand32(self) -> int:
        """Return a uniform 32-bit unsigned integer."""
        if not self._precomputed:
            block = self._rng.generate(32)
            self._precomputed = [
                int.from_bytes(block[i : i + 4], "little") for i in range(28, -1, -4)
            ]
        return self._precomputed.pop()

    def rand_bits(self, bits: int) -> int:
        """Return a uniform integer of ``bits`` bits (1 to 32)."""
        if not 1 <= bits <= 32:
            raise ValueError("bits must be between 1 and 32")
        if self._bits_left < bits:
            self._integer |= self.rand32() << self._bits_left
            self._bits_left += 32
        result = self._integer & ((1 << bits) - 1)
        self._integer >>= bits
        self._bits_left -= bits
        return result

    def rand_int(self, limit: int) -> int:
        """Return a uniform integer in ``[0, limit)``; 0 when ``limit <= 1``."""
        if limit > _U32:
            raise ValueError("limit must fit in 32 bits")
        if limit <= 1:
            return 0
        bits = (limit - 1).bit_length()
        extra = _ADDBITS[bits]
        if extra:
            bits += extra
            mult = (_U32 >> (32 - bits)) // limit
            bound = limit * mult
        else:
            bound = limit
            mult = 1
        while True:
            x = self.rand_bits(bits)
            if x < bound:
                return x if mult == 1 else x % limit

    def rand256(self) -> bytes:
        """Return 32 uniformly random bytes."""
        return self._rng.generate(32)

    def rand_bytes_test(self, length: int) -> bytes:
        """Return ``length`` bytes made of long runs of equal bits."""
        if length < 0:
            raise ValueError("length must not be negative")
        out = bytearray(length)
        total = length * 8
        pos = 0
        while pos < total:
            first = self.rand_bits(6)
            run = 1 + (first * self.rand_bits(5) + 16) // 31
            value = self.rand_bits(1)
            end = min(pos + run, total)
            if value:
                for bit in range(pos, end):
                    out[bit // 8] |= 1 << (bit % 8)
            pos = end
        return bytes(out)

    def rand256_test(self) -> bytes:
        """Return 32 bytes with long runs of equal bits."""
        return self.rand_bytes_test(32)