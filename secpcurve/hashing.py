"""SHA-256, HMAC-SHA256 and the RFC 6979 HMAC-SHA256 deterministic generator."""

from __future__ import annotations

import hashlib
import hmac

__all__ = ["Sha256", "HmacSha256", "Rfc6979HmacSha256", "sha256", "hmac_sha256"]

_ZERO = b"\x00"
_ONE = b"\x01"


class Sha256:
    """Incremental SHA-256 hasher."""

    def __init__(self) -> None:
        self._state = hashlib.sha256()

    def update(self, data: bytes) -> Sha256:
        """Feed more bytes into the hash; returns self for chaining."""
        self._state.update(bytes(data))
        return self

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        return self._state.digest()


class HmacSha256:
    """Incremental HMAC-SHA256; keys longer than 64 bytes are hashed first."""

    def __init__(self, key: bytes) -> None:
        self._mac = hmac.new(bytes(key), digestmod=hashlib.sha256)

    def update(self, data: bytes) -> HmacSha256:
        """Feed more message bytes; returns self for chaining."""
        self._mac.update(bytes(data))
        return self

    def digest(self) -> bytes:
        """Return the 32-byte authentication code."""
        return self._mac.digest()


def sha256(data: bytes) -> bytes:
    """One-shot SHA-256 of ``data``."""
    return Sha256().update(data).digest()


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """One-shot HMAC-SHA256 of ``data`` under ``key``."""
    return HmacSha256(key).update(data).digest()


class Rfc6979HmacSha256:
    """The HMAC_DRBG of RFC 6979 section 3.2, instantiated with SHA-256."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        self._v = b"\x01" * 32
        self._k = b"\x00" * 32
        # Steps 3.2.d to 3.2.g.
        for sep in (_ZERO, _ONE):
            self._k = hmac_sha256(self._k, self._v + sep + key)
            self._v = hmac_sha256(self._k, self._v)
        self._retry = False

    def generate(self, outlen: int) -> bytes:
        """Produce ``outlen`` pseudo-random bytes (RFC 6979 step 3.2.h)."""
        if outlen < 0:
            raise ValueError("output length must not be negative")
        if self._retry:
            self._k = hmac_sha256(self._k, self._v + _ZERO)
            self._v = hmac_sha256(self._k, self._v)
        chunks = []
        remaining = outlen
        while remaining > 0:
            self._v = hmac_sha256(self._k, self._v)
            take = min(remaining, 32)
            chunks.append(self._v[:take])
            remaining -= take
        self._retry = True
        return b"".join(chunks)

    def finalize(self) -> None:
        """Wipe the generator state."""
        self._k = b"\x00" * 32
        self._v = b"\x00" * 32
        self._retry = False