"""Hashing, a deterministic test RNG, field limb kernels and scalar arithmetic for secp256k1."""

__version__ = "0.1.0"

__all__ = [
    "field5x52",
    "hashing",
    "scalar",
    "scalar_low",
    "testrand",
]