[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secpcurve"
version = "0.1.0"
description = "Pure-Python building blocks for secp256k1: SHA-256/HMAC/RFC 6979 hashing, a deterministic test RNG, 5x52 limb field kernels and scalar arithmetic."
requires-python = ">=3.10"
dependencies = []
keywords = ["secp256k1", "elliptic-curve", "ecc", "sha256", "hmac", "rfc6979", "scalar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["secpcurve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
