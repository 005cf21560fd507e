# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
HMAC (RFC 2104) over any SHA-2 HashAlgorithm.

HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m)), where K' is the key
normalized to the hash block size: hashed first if longer than a block,
then zero-padded.
"""

from .hashing import SHA256, SHA512, HashAlgorithm

# Byte translation tables for the ipad/opad XOR
_TRANS_36 = bytes(x ^ 0x36 for x in range(256))
_TRANS_5C = bytes(x ^ 0x5C for x in range(256))


def normalize_key(algorithm: HashAlgorithm, key: bytes) -> bytes:
    """
    Normalize an HMAC key to exactly one block.

    Args:
        algorithm: Underlying hash algorithm
        key: Key of any length

    Returns:
        block_size bytes: H(key) zero-padded if the key is longer than a
        block, otherwise the key zero-padded

    Example:
        >>> len(normalize_key(SHA256, b"key"))
        64
    """
    key = bytes(key)
    if len(key) > algorithm.block_size:
        key = algorithm.digest(key)
    return key.ljust(algorithm.block_size, b"\x00")


class Hmac:
    """
    HMAC keyed with a fixed key.

    The ipad and opad key blocks are compressed once at construction, so
    computing many MACs under one key (as PBKDF2 does) costs two
    compressions less per MAC than hashing ipad || m and opad || inner
    from scratch. Results are identical.
    """

    def __init__(self, algorithm: HashAlgorithm, key: bytes):
        """
        Initialize keyed HMAC.

        Args:
            algorithm: Underlying hash algorithm (SHA256 or SHA512)
            key: Key of any length
        """
        self.algorithm = algorithm
        block = normalize_key(algorithm, key)
        self._inner_state = algorithm.absorb(algorithm.initial_state, block.translate(_TRANS_36))
        self._outer_state = algorithm.absorb(algorithm.initial_state, block.translate(_TRANS_5C))

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size

    def digest(self, message: bytes) -> bytes:
        """Compute the MAC of a message under this key."""
        block_size = self.algorithm.block_size
        inner = self.algorithm.finish(self._inner_state, message, consumed=block_size)
        return self.algorithm.finish(self._outer_state, inner, consumed=block_size)


def hmac_digest(algorithm: HashAlgorithm, key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC of a message.

    Args:
        algorithm: Underlying hash algorithm
        key: Key of any length
        message: Message to authenticate

    Returns:
        MAC of algorithm.digest_size bytes
    """
    return Hmac(algorithm, key).digest(message)


def hmac_sha256_bytes(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA256 (block size 64, 32-byte MAC)."""
    return hmac_digest(SHA256, key, message)


def hmac_sha512_bytes(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA512 (block size 128, 64-byte MAC)."""
    return hmac_digest(SHA512, key, message)
