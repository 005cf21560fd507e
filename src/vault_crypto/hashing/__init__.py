# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
SHA-2 hash engines.

Modules:
    constants: Round constants and initial states for SHA-256 and SHA-512
    engine: Generic Merkle-Damgard engine and the two family instances
"""

from .engine import (
    ALGORITHMS,
    SHA256,
    SHA512,
    HashAlgorithm,
    get_algorithm,
    sha256_bytes,
    sha512_bytes,
)

__all__ = [
    "ALGORITHMS",
    "SHA256",
    "SHA512",
    "HashAlgorithm",
    "get_algorithm",
    "sha256_bytes",
    "sha512_bytes",
]
