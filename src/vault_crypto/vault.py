# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Password vault helpers built on the primitives.

The vault key is PBKDF2-HMAC-SHA256 over master password || secret key
with the account salt. Verification tokens are SHA-256 digests of the
compact JSON form of the vault contents, keys kept in insertion order so
the bytes match what a browser client's JSON.stringify produces. They are
used to check that a decrypted or synced vault matches what was stored.
"""

import base64
import json
import logging
import secrets
from typing import Any, Optional

from .api import pbkdf2_hmac_sha256, sha256
from .config import settings
from .encoding import verify_hash_format

logger = logging.getLogger(__name__)


def generate_vault_salt(length: int = 32) -> str:
    """
    Generate a random account salt or secret key.

    Args:
        length: Number of random bytes (default: 32)

    Returns:
        Standard base64 of the random bytes (44 characters for 32 bytes)
    """
    if length < 1:
        raise ValueError(f"Salt length must be positive, got {length}")
    return base64.b64encode(secrets.token_bytes(length)).decode("ascii")


def derive_vault_key(
    master_password: str,
    secret_key: str,
    salt: str,
    iterations: Optional[int] = None,
    key_length: Optional[int] = None
) -> str:
    """
    Derive the vault encryption key.

    The default cost is 600 000 PBKDF2 iterations. On this pure-Python
    engine one derivation at that cost takes on the order of a minute or
    more, so pass a small `iterations` in tests and interactive use.

    Args:
        master_password: User's master password
        secret_key: Account secret key, appended to the master password
        salt: Account salt
        iterations: PBKDF2 iterations (default: settings.vault_kdf_iterations)
        key_length: Key length in bytes (default: settings.vault_key_length)

    Returns:
        Derived key as lowercase hex (2 * key_length characters)

    Raises:
        InvalidIterationCountError: If iterations < 1

    Example:
        >>> key = derive_vault_key("hunter2", "A3-XYZ", "c0ffee", iterations=1)
        >>> len(key)
        64
    """
    if iterations is None:
        iterations = settings.vault_kdf_iterations
    if key_length is None:
        key_length = settings.vault_key_length

    logger.info(f"Deriving {key_length * 8}-bit vault key using {iterations} iterations")

    return pbkdf2_hmac_sha256(master_password + secret_key, salt, iterations, key_length)


def canonical_json(payload: Any) -> str:
    """
    Serialize payload the way JSON.stringify does.

    Keys stay in insertion order, there is no whitespace, and non-ASCII
    text is emitted as-is rather than as \\u escapes. Reordering keys
    changes the output and therefore the verification token.
    """
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def vault_verification_token(payload: Any) -> str:
    """
    Compute the verification token for vault contents.

    Args:
        payload: JSON-serializable vault contents

    Returns:
        SHA-256 of the canonical JSON, 64 hex characters

    Example:
        >>> token = vault_verification_token({"entries": []})
        >>> len(token)
        64
    """
    return sha256(canonical_json(payload))


def verify_vault_token(payload: Any, token: str) -> bool:
    """
    Check vault contents against a stored verification token.

    Args:
        payload: JSON-serializable vault contents
        token: Token previously returned by vault_verification_token

    Returns:
        True if the token matches, False if it does not or is malformed
    """
    if not verify_hash_format(token):
        logger.warning("Malformed vault verification token")
        return False

    return secrets.compare_digest(vault_verification_token(payload), token.lower())
