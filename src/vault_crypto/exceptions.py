# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Exceptions raised by vault_crypto.

Hashing and HMAC are total over bytes and never raise. Only key derivation
validates its arguments.
"""


class VaultCryptoError(Exception):
    """Base class for all vault_crypto errors."""


class DerivedKeyTooLongError(VaultCryptoError, ValueError):
    """Raised when PBKDF2 is asked for more blocks than a 32-bit counter can index."""

    def __init__(self, dk_len: int, max_length: int) -> None:
        self.dk_len = dk_len
        self.max_length = max_length
        super().__init__(
            f"derived key too long: requested {dk_len} bytes, maximum is {max_length}"
        )


class InvalidIterationCountError(VaultCryptoError, ValueError):
    """Raised when PBKDF2 is called with fewer than one iteration."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"iteration count must be at least 1, got {iterations}")


class SelfTestError(VaultCryptoError):
    """Raised when a known-answer or reference cross-check fails."""
