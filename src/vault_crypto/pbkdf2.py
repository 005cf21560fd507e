# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
PBKDF2 (RFC 8018, section 5.2) with HMAC as the pseudorandom function.

DK = T1 || T2 || ... || Tl, truncated to dk_len bytes, where
Ti = U1 ^ U2 ^ ... ^ Uc, U1 = PRF(P, S || INT(i)) and Uj = PRF(P, U(j-1)).
The block index INT(i) is a 32-bit big-endian integer, which bounds the
derived key at (2^32 - 1) * hLen bytes.
"""

import logging

from .exceptions import DerivedKeyTooLongError, InvalidIterationCountError
from .hashing import SHA256, SHA512, HashAlgorithm
from .mac import Hmac

logger = logging.getLogger(__name__)

# Largest block index a 32-bit counter can hold
MAX_BLOCK_INDEX = 2**32 - 1


def max_derived_key_length(algorithm: HashAlgorithm) -> int:
    """Maximum PBKDF2 output length in bytes for an algorithm."""
    return MAX_BLOCK_INDEX * algorithm.digest_size


def _derive_block(prf: Hmac, salt: bytes, iterations: int, index: int) -> bytes:
    """Compute Ti for one block index."""
    u = prf.digest(salt + index.to_bytes(4, byteorder="big"))
    block = int.from_bytes(u, byteorder="big")
    for _ in range(iterations - 1):
        u = prf.digest(u)
        block ^= int.from_bytes(u, byteorder="big")
    return block.to_bytes(prf.digest_size, byteorder="big")


def pbkdf2_hmac(
    algorithm: HashAlgorithm,
    password: bytes,
    salt: bytes,
    iterations: int,
    dk_len: int
) -> bytes:
    """
    Derive a key from a password with PBKDF2-HMAC.

    Args:
        algorithm: Hash underlying the HMAC (SHA256 or SHA512)
        password: Password bytes (the HMAC key)
        salt: Salt bytes
        iterations: Iteration count c (at least 1)
        dk_len: Derived key length in bytes (0 returns b"")

    Returns:
        Derived key of exactly dk_len bytes

    Raises:
        DerivedKeyTooLongError: If dk_len > (2^32 - 1) * hLen
        InvalidIterationCountError: If iterations < 1
        ValueError: If dk_len is negative

    Example:
        >>> dk = pbkdf2_hmac(SHA256, b"password", b"salt", 1, 32)
        >>> dk.hex()[:16]
        '120fb6cffcf8b32c'
    """
    max_length = max_derived_key_length(algorithm)
    if dk_len > max_length:
        raise DerivedKeyTooLongError(dk_len, max_length)
    if dk_len < 0:
        raise ValueError(f"Derived key length must be non-negative, got {dk_len}")
    if iterations < 1:
        raise InvalidIterationCountError(iterations)

    logger.debug(
        f"PBKDF2-HMAC-{algorithm.name.upper()}: deriving {dk_len} bytes "
        f"with {iterations} iterations"
    )

    if dk_len == 0:
        return b""

    prf = Hmac(algorithm, password)
    salt = bytes(salt)
    h_len = algorithm.digest_size
    block_count = (dk_len + h_len - 1) // h_len
    last_length = dk_len - (block_count - 1) * h_len

    blocks = [
        _derive_block(prf, salt, iterations, index)
        for index in range(1, block_count + 1)
    ]
    blocks[-1] = blocks[-1][:last_length]

    return b"".join(blocks)


def pbkdf2_hmac_sha256_bytes(
    password: bytes,
    salt: bytes,
    iterations: int,
    dk_len: int
) -> bytes:
    """PBKDF2 with HMAC-SHA256 (hLen = 32)."""
    return pbkdf2_hmac(SHA256, password, salt, iterations, dk_len)


def pbkdf2_hmac_sha512_bytes(
    password: bytes,
    salt: bytes,
    iterations: int,
    dk_len: int
) -> bytes:
    """PBKDF2 with HMAC-SHA512 (hLen = 64)."""
    return pbkdf2_hmac(SHA512, password, salt, iterations, dk_len)
