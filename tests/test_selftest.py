# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Tests for the known-answer self-test and module entry point.
"""

import pytest

from vault_crypto import selftest
from vault_crypto.__main__ import main
from vault_crypto.exceptions import SelfTestError


@pytest.fixture
def broken_vector(monkeypatch):
    """Add a vector with a wrong expected value."""
    vectors = selftest.TEST_VECTORS + [
        {
            "description": "Deliberately wrong vector",
            "operation": "hash",
            "algorithm": "sha256",
            "inputs": {"message": b"abc"},
            "expected": "00" * 32,
        }
    ]
    monkeypatch.setattr(selftest, "TEST_VECTORS", vectors)


class TestSelfTest:
    """Test vector generation and validation."""

    def test_generate_test_vectors(self):
        """Test vector generation."""
        vectors = selftest.generate_test_vectors()

        assert len(vectors) == len(selftest.TEST_VECTORS)
        for vector in vectors:
            assert 'computed' in vector
            assert 'reference' in vector
            assert vector['computed'] == vector['expected']
            assert vector['reference'] == vector['expected']

    def test_validate_implementation(self):
        """Test implementation validation."""
        assert selftest.validate_implementation()

    def test_run_self_test_strict(self):
        assert selftest.run_self_test(strict=True)

    def test_failure_detected(self, broken_vector):
        """Test that a mismatching vector fails validation."""
        failures = selftest.find_failures()

        assert [v['description'] for v in failures] == ["Deliberately wrong vector"]
        assert not selftest.validate_implementation()

    def test_failure_strict_raises(self, broken_vector):
        with pytest.raises(SelfTestError):
            selftest.run_self_test(strict=True)

    def test_unknown_operation(self):
        with pytest.raises(ValueError):
            selftest.compute_vector({
                "operation": "md5",
                "algorithm": "sha256",
                "inputs": {},
            })


class TestEntryPoint:
    """Test python -m vault_crypto."""

    def test_main_success(self, capsys):
        assert main([]) == 0
        assert "Implementation validated" in capsys.readouterr().out

    def test_main_print_vectors(self, capsys):
        assert main(["--print-vectors"]) == 0
        assert "RFC 4231" in capsys.readouterr().out

    def test_main_failure(self, broken_vector, capsys):
        assert main(["--log-level", "critical"]) == 1
        assert "validation failed" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
