# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for PBKDF2-HMAC.

Tests:
- Published PBKDF2-HMAC-SHA256 / SHA512 vectors
- Block assembly and truncation of the final block
- Argument validation (dk_len bound, iteration count)
"""

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from vault_crypto.exceptions import (
    DerivedKeyTooLongError,
    InvalidIterationCountError,
    VaultCryptoError,
)
from vault_crypto.hashing import SHA256, SHA512
from vault_crypto.mac import hmac_sha256_bytes, hmac_sha512_bytes
from vault_crypto.pbkdf2 import (
    MAX_BLOCK_INDEX,
    max_derived_key_length,
    pbkdf2_hmac,
    pbkdf2_hmac_sha256_bytes,
    pbkdf2_hmac_sha512_bytes,
)


def reference_pbkdf2(algorithm, password: bytes, salt: bytes, iterations: int, dk_len: int) -> bytes:
    """PBKDF2 computed by the cryptography library."""
    kdf = PBKDF2HMAC(algorithm=algorithm(), length=dk_len, salt=salt, iterations=iterations)
    return kdf.derive(password)


class TestKnownVectors:
    """Test published vectors."""

    def test_sha256_one_iteration(self):
        """Test P="password", S="salt", c=1, dkLen=32."""
        dk = pbkdf2_hmac_sha256_bytes(b"password", b"salt", 1, 32)
        assert dk.hex() == "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"

    def test_sha256_two_iterations(self):
        """Test P="password", S="salt", c=2, dkLen=32."""
        dk = pbkdf2_hmac_sha256_bytes(b"password", b"salt", 2, 32)
        assert dk.hex() == "ae4d0c95af6b46d32d0adff928f06dd02a303f8ef3c251dfd6e2d85a95474c43"

    @pytest.mark.slow
    def test_sha256_4096_iterations(self):
        """Test P="password", S="salt", c=4096, dkLen=32."""
        dk = pbkdf2_hmac_sha256_bytes(b"password", b"salt", 4096, 32)
        assert dk.hex() == "c5e478d59288c841aa530db6845c4c8d962893a001ce4e11a4963873aa98134a"

    def test_sha512_one_iteration(self):
        """Test P="password", S="salt", c=1, dkLen=64."""
        dk = pbkdf2_hmac_sha512_bytes(b"password", b"salt", 1, 64)
        assert dk.hex() == (
            "867f70cf1ade02cff3752599a3a53dc4af34c7a669815ae5d513554e1c8cf252"
            "c02d470a285a0501bad999bfe943c08f050235d7d68b1da55e63f73b60a57fce"
        )

    @pytest.mark.parametrize(
        "algorithm, reference", [(SHA256, hashes.SHA256), (SHA512, hashes.SHA512)]
    )
    @pytest.mark.parametrize("dk_len", [1, 16, 31, 32, 33, 64, 65, 100, 200])
    def test_matches_reference(self, algorithm, reference, dk_len):
        """Test against the cryptography library across output lengths."""
        password = b"correct horse battery staple"
        salt = b"\x00\x01NaCl\xff"

        assert pbkdf2_hmac(algorithm, password, salt, 3, dk_len) == reference_pbkdf2(
            reference, password, salt, 3, dk_len
        )


class TestBlockAssembly:
    """Test the T1 || ... || Tl layout."""

    def test_single_iteration_is_one_hmac_per_block(self):
        """Test that c=1 gives Ti = HMAC(P, S || INT(i))."""
        password, salt = b"pw", b"salt"
        dk = pbkdf2_hmac_sha256_bytes(password, salt, 1, 64)

        assert dk[:32] == hmac_sha256_bytes(password, salt + b"\x00\x00\x00\x01")
        assert dk[32:] == hmac_sha256_bytes(password, salt + b"\x00\x00\x00\x02")

    def test_single_iteration_sha512(self):
        """Test c=1 for the 512 family."""
        dk = pbkdf2_hmac_sha512_bytes(b"pw", b"salt", 1, 64)
        assert dk == hmac_sha512_bytes(b"pw", b"salt\x00\x00\x00\x01")

    def test_two_iterations_xor_fold(self):
        """Test that c=2 gives U1 ^ U2."""
        u1 = hmac_sha256_bytes(b"pw", b"salt\x00\x00\x00\x01")
        u2 = hmac_sha256_bytes(b"pw", u1)
        expected = bytes(x ^ y for x, y in zip(u1, u2))

        assert pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 2, 32) == expected

    def test_zero_length_returns_empty(self):
        """Test that dk_len=0 returns an empty key."""
        assert pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 1, 0) == b""
        assert pbkdf2_hmac_sha512_bytes(b"pw", b"salt", 1, 0) == b""

    @pytest.mark.parametrize("algorithm", [SHA256, SHA512])
    def test_only_last_block_truncated(self, algorithm):
        """Test dk_len = k * hLen + r keeps full leading blocks."""
        h_len = algorithm.digest_size
        full = pbkdf2_hmac(algorithm, b"pw", b"salt", 2, 3 * h_len)
        partial = pbkdf2_hmac(algorithm, b"pw", b"salt", 2, 2 * h_len + 5)

        assert len(partial) == 2 * h_len + 5
        assert partial == full[:2 * h_len + 5]

    def test_deterministic(self):
        """Test that same inputs produce same key."""
        assert pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 5, 40) == pbkdf2_hmac_sha256_bytes(
            b"pw", b"salt", 5, 40
        )

    def test_different_salts(self):
        """Test that different salts produce different keys."""
        assert pbkdf2_hmac_sha256_bytes(b"pw", b"salt1", 1, 32) != pbkdf2_hmac_sha256_bytes(
            b"pw", b"salt2", 1, 32
        )


class TestValidation:
    """Test argument validation."""

    def test_max_length(self):
        """Test the 32-bit block counter bound."""
        assert MAX_BLOCK_INDEX == 2**32 - 1
        assert max_derived_key_length(SHA256) == (2**32 - 1) * 32
        assert max_derived_key_length(SHA512) == (2**32 - 1) * 64

    @pytest.mark.parametrize("algorithm", [SHA256, SHA512])
    def test_derived_key_too_long(self, algorithm):
        """Test error when dk_len exceeds (2^32 - 1) * hLen."""
        dk_len = max_derived_key_length(algorithm) + 1

        with pytest.raises(DerivedKeyTooLongError) as exc_info:
            pbkdf2_hmac(algorithm, b"pw", b"salt", 1, dk_len)

        assert exc_info.value.dk_len == dk_len
        assert exc_info.value.max_length == dk_len - 1
        assert "derived key too long" in str(exc_info.value)

    def test_derived_key_too_long_is_value_error(self):
        """Test that the error is catchable as ValueError and VaultCryptoError."""
        dk_len = max_derived_key_length(SHA256) + 1

        with pytest.raises(ValueError):
            pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 1, dk_len)
        with pytest.raises(VaultCryptoError):
            pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 1, dk_len)

    @pytest.mark.parametrize("iterations", [0, -1])
    def test_invalid_iterations(self, iterations):
        """Test error on fewer than one iteration."""
        with pytest.raises(InvalidIterationCountError) as exc_info:
            pbkdf2_hmac_sha256_bytes(b"pw", b"salt", iterations, 32)

        assert exc_info.value.iterations == iterations

    def test_negative_length(self):
        """Test error on negative dk_len."""
        with pytest.raises(ValueError):
            pbkdf2_hmac_sha256_bytes(b"pw", b"salt", 1, -1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
