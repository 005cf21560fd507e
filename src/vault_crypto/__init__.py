# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
vault_crypto - SHA-2, HMAC and PBKDF2 primitives

This package provides the hashing and key derivation used by the password
vault client and its login flow:
- SHA-256 and SHA-512 from one generic SHA-2 engine
- HMAC-SHA256 and HMAC-SHA512
- PBKDF2-HMAC-SHA256 and PBKDF2-HMAC-SHA512
- Lowercase hex encoding at the output boundary

Modules:
    hashing: Generic SHA-2 engine and constant tables
    mac: HMAC over any SHA-2 algorithm
    pbkdf2: PBKDF2 over any HMAC
    encoding: Hex encoding utilities
    api: Text-in, hex-out boundary functions
    vault: Vault key derivation and verification tokens
    selftest: Known-answer validation against published vectors

Example Usage:
    >>> from vault_crypto import sha256, hmac_sha256, pbkdf2_hmac_sha256
    >>>
    >>> sha256("abc")[:16]
    'ba7816bf8f01cfea'
    >>> key = pbkdf2_hmac_sha256("password", "salt", 1, 32)
    >>> len(key)
    64
"""

__version__ = "0.1.0"
__author__ = "The Birthmark Standard Foundation"

# Boundary functions
from .api import (
    sha256,
    sha512,
    hmac_sha256,
    hmac_sha512,
    pbkdf2_hmac_sha256,
    pbkdf2_hmac_sha512,
)

# Byte-level primitives
from .hashing import (
    SHA256,
    SHA512,
    HashAlgorithm,
    get_algorithm,
    sha256_bytes,
    sha512_bytes,
)
from .mac import (
    Hmac,
    hmac_digest,
    hmac_sha256_bytes,
    hmac_sha512_bytes,
)
from .pbkdf2 import (
    max_derived_key_length,
    pbkdf2_hmac,
    pbkdf2_hmac_sha256_bytes,
    pbkdf2_hmac_sha512_bytes,
)
from .encoding import (
    to_hex,
    from_hex,
    verify_hash_format,
)

# Vault helpers
from .vault import (
    derive_vault_key,
    generate_vault_salt,
    vault_verification_token,
    verify_vault_token,
)

# Errors
from .exceptions import (
    VaultCryptoError,
    DerivedKeyTooLongError,
    InvalidIterationCountError,
    SelfTestError,
)

__all__ = [
    # Version
    "__version__",

    # Boundary
    "sha256",
    "sha512",
    "hmac_sha256",
    "hmac_sha512",
    "pbkdf2_hmac_sha256",
    "pbkdf2_hmac_sha512",

    # Hashing
    "SHA256",
    "SHA512",
    "HashAlgorithm",
    "get_algorithm",
    "sha256_bytes",
    "sha512_bytes",

    # HMAC
    "Hmac",
    "hmac_digest",
    "hmac_sha256_bytes",
    "hmac_sha512_bytes",

    # PBKDF2
    "max_derived_key_length",
    "pbkdf2_hmac",
    "pbkdf2_hmac_sha256_bytes",
    "pbkdf2_hmac_sha512_bytes",

    # Encoding
    "to_hex",
    "from_hex",
    "verify_hash_format",

    # Vault
    "derive_vault_key",
    "generate_vault_salt",
    "vault_verification_token",
    "verify_vault_token",

    # Errors
    "VaultCryptoError",
    "DerivedKeyTooLongError",
    "InvalidIterationCountError",
    "SelfTestError",
]
