# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Hex encoding at the output boundary.

All digests, MACs and derived keys leave the library as lowercase hex.
"""

HEX_ALPHABET = "0123456789abcdef"

_HEX_PAIRS = tuple(HEX_ALPHABET[b >> 4] + HEX_ALPHABET[b & 0x0F] for b in range(256))


def to_hex(data: bytes) -> str:
    """
    Encode bytes as lowercase hex, two characters per byte.

    Args:
        data: Bytes to encode

    Returns:
        Hex string of length 2 * len(data)

    Example:
        >>> to_hex(b"\\x00\\xff\\x10")
        '00ff10'
    """
    return "".join(_HEX_PAIRS[b] for b in data)


def from_hex(text: str) -> bytes:
    """
    Decode a hex string (either case) back into bytes.

    Raises:
        ValueError: If text has odd length or contains non-hex characters
    """
    if len(text) % 2 != 0:
        raise ValueError(f"Hex string must have even length, got {len(text)}")

    normalized = text.lower()
    for i, char in enumerate(normalized):
        if char not in HEX_ALPHABET:
            raise ValueError(f"Invalid hex character {text[i]!r} at position {i}")

    return bytes(
        HEX_ALPHABET.index(normalized[i]) << 4 | HEX_ALPHABET.index(normalized[i + 1])
        for i in range(0, len(normalized), 2)
    )


def verify_hash_format(hash_string: str, digest_size: int = 32) -> bool:
    """
    Verify that a string is a well-formed hex digest.

    Args:
        hash_string: String to validate
        digest_size: Expected digest size in bytes (32 for SHA-256, 64 for SHA-512)

    Returns:
        True if hash_string is 2 * digest_size hex characters, False otherwise

    Example:
        >>> verify_hash_format("ab" * 32)
        True
        >>> verify_hash_format("not a hash")
        False
    """
    if not isinstance(hash_string, str):
        return False
    if len(hash_string) != 2 * digest_size:
        return False
    return all(char in HEX_ALPHABET for char in hash_string.lower())
