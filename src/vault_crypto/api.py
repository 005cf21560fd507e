# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Boundary functions for host callers.

Text arguments are encoded as UTF-8 and treated as raw bytes; bytes
arguments pass through unchanged. Every function returns lowercase hex.
"""

from .encoding import to_hex
from .hashing import sha256_bytes, sha512_bytes
from .mac import hmac_sha256_bytes, hmac_sha512_bytes
from .pbkdf2 import pbkdf2_hmac_sha256_bytes, pbkdf2_hmac_sha512_bytes


def _as_bytes(value: str | bytes, name: str) -> bytes:
    """Encode text as UTF-8; accept bytes-like values as-is."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be str or bytes, got {type(value).__name__}")


def sha256(data: str | bytes) -> str:
    """
    SHA-256 digest as 64 hex characters.

    Example:
        >>> sha256("")
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    """
    return to_hex(sha256_bytes(_as_bytes(data, "data")))


def sha512(data: str | bytes) -> str:
    """SHA-512 digest as 128 hex characters."""
    return to_hex(sha512_bytes(_as_bytes(data, "data")))


def hmac_sha256(key: str | bytes, data: str | bytes) -> str:
    """HMAC-SHA256 as 64 hex characters."""
    return to_hex(hmac_sha256_bytes(_as_bytes(key, "key"), _as_bytes(data, "data")))


def hmac_sha512(key: str | bytes, data: str | bytes) -> str:
    """HMAC-SHA512 as 128 hex characters."""
    return to_hex(hmac_sha512_bytes(_as_bytes(key, "key"), _as_bytes(data, "data")))


def pbkdf2_hmac_sha256(
    password: str | bytes,
    salt: str | bytes,
    iterations: int,
    dk_len: int
) -> str:
    """
    PBKDF2-HMAC-SHA256 derived key as 2 * dk_len hex characters.

    Raises:
        DerivedKeyTooLongError: If dk_len > (2^32 - 1) * 32
        InvalidIterationCountError: If iterations < 1
    """
    dk = pbkdf2_hmac_sha256_bytes(
        _as_bytes(password, "password"), _as_bytes(salt, "salt"), iterations, dk_len
    )
    return to_hex(dk)


def pbkdf2_hmac_sha512(
    password: str | bytes,
    salt: str | bytes,
    iterations: int,
    dk_len: int
) -> str:
    """
    PBKDF2-HMAC-SHA512 derived key as 2 * dk_len hex characters.

    Raises:
        DerivedKeyTooLongError: If dk_len > (2^32 - 1) * 64
        InvalidIterationCountError: If iterations < 1
    """
    dk = pbkdf2_hmac_sha512_bytes(
        _as_bytes(password, "password"), _as_bytes(salt, "salt"), iterations, dk_len
    )
    return to_hex(dk)
