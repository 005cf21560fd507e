# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Known-answer self-test.

Every vector is checked twice: against its published value (FIPS 180-4
examples, RFC 4231, RFC 6070-style PBKDF2-HMAC-SHA256 vectors) and against
the `cryptography` library computing the same operation. A mismatch on
either side means this implementation has diverged from the standard.

Run `python -m vault_crypto` to validate and print vectors.
"""

import logging
from typing import Any

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .encoding import to_hex
from .exceptions import SelfTestError
from .hashing import get_algorithm
from .mac import hmac_digest
from .pbkdf2 import pbkdf2_hmac

logger = logging.getLogger(__name__)

_REFERENCE_HASHES = {
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}

_RFC4231_LONG_KEY = b"\xaa" * 131

TEST_VECTORS = [
    {
        "description": "SHA-256 empty string",
        "operation": "hash",
        "algorithm": "sha256",
        "inputs": {"message": b""},
        "expected": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    },
    {
        "description": "SHA-256 'abc' (FIPS 180-4 one-block example)",
        "operation": "hash",
        "algorithm": "sha256",
        "inputs": {"message": b"abc"},
        "expected": "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
    },
    {
        "description": "SHA-256 448-bit message (FIPS 180-4 two-block example)",
        "operation": "hash",
        "algorithm": "sha256",
        "inputs": {"message": b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"},
        "expected": "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1",
    },
    {
        "description": "SHA-512 empty string",
        "operation": "hash",
        "algorithm": "sha512",
        "inputs": {"message": b""},
        "expected": (
            "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
            "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
        ),
    },
    {
        "description": "SHA-512 'abc' (FIPS 180-4 one-block example)",
        "operation": "hash",
        "algorithm": "sha512",
        "inputs": {"message": b"abc"},
        "expected": (
            "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
        ),
    },
    {
        "description": "SHA-512 896-bit message (FIPS 180-4 two-block example)",
        "operation": "hash",
        "algorithm": "sha512",
        "inputs": {
            "message": (
                b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
                b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu"
            )
        },
        "expected": (
            "8e959b75dae313da8cf4f72814fc143f8f7779c6eb9f7fa17299aeadb6889018"
            "501d289e4900f7e4331b99dec4b5433ac7d329eeb6dd26545e96e55b874be909"
        ),
    },
    {
        "description": "HMAC-SHA256 RFC 4231 test case 1",
        "operation": "hmac",
        "algorithm": "sha256",
        "inputs": {"key": b"\x0b" * 20, "message": b"Hi There"},
        "expected": "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7",
    },
    {
        "description": "HMAC-SHA256 RFC 4231 test case 2 (short key)",
        "operation": "hmac",
        "algorithm": "sha256",
        "inputs": {"key": b"Jefe", "message": b"what do ya want for nothing?"},
        "expected": "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843",
    },
    {
        "description": "HMAC-SHA256 RFC 4231 test case 6 (key longer than block)",
        "operation": "hmac",
        "algorithm": "sha256",
        "inputs": {
            "key": _RFC4231_LONG_KEY,
            "message": b"Test Using Larger Than Block-Size Key - Hash Key First",
        },
        "expected": "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54",
    },
    {
        "description": "HMAC-SHA512 RFC 4231 test case 1",
        "operation": "hmac",
        "algorithm": "sha512",
        "inputs": {"key": b"\x0b" * 20, "message": b"Hi There"},
        "expected": (
            "87aa7cdea5ef619d4ff0b4241a1d6cb02379f4e2ce4ec2787ad0b30545e17cde"
            "daa833b7d6b8a702038b274eaea3f4e4be9d914eeb61f1702e696c203a126854"
        ),
    },
    {
        "description": "HMAC-SHA512 RFC 4231 test case 2 (short key)",
        "operation": "hmac",
        "algorithm": "sha512",
        "inputs": {"key": b"Jefe", "message": b"what do ya want for nothing?"},
        "expected": (
            "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
            "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737"
        ),
    },
    {
        "description": "HMAC-SHA512 RFC 4231 test case 6 (key longer than block)",
        "operation": "hmac",
        "algorithm": "sha512",
        "inputs": {
            "key": _RFC4231_LONG_KEY,
            "message": b"Test Using Larger Than Block-Size Key - Hash Key First",
        },
        "expected": (
            "80b24263c7c1a3ebb71493c1dd7be8b49b46d1f41b4aeec1121b013783f8f352"
            "6b56d037e05f2598bd0fd2215d6a1e5295e64f73f63f0aec8b915a985d786598"
        ),
    },
    {
        "description": "PBKDF2-HMAC-SHA256 c=1, dkLen=32",
        "operation": "pbkdf2",
        "algorithm": "sha256",
        "inputs": {"password": b"password", "salt": b"salt", "iterations": 1, "dk_len": 32},
        "expected": "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b",
    },
    {
        "description": "PBKDF2-HMAC-SHA256 c=2, dkLen=32",
        "operation": "pbkdf2",
        "algorithm": "sha256",
        "inputs": {"password": b"password", "salt": b"salt", "iterations": 2, "dk_len": 32},
        "expected": "ae4d0c95af6b46d32d0adff928f06dd02a303f8ef3c251dfd6e2d85a95474c43",
    },
    {
        "description": "PBKDF2-HMAC-SHA512 c=1, dkLen=64",
        "operation": "pbkdf2",
        "algorithm": "sha512",
        "inputs": {"password": b"password", "salt": b"salt", "iterations": 1, "dk_len": 64},
        "expected": (
            "867f70cf1ade02cff3752599a3a53dc4af34c7a669815ae5d513554e1c8cf252"
            "c02d470a285a0501bad999bfe943c08f050235d7d68b1da55e63f73b60a57fce"
        ),
    },
]


def compute_vector(vector: dict[str, Any]) -> bytes:
    """Compute a vector's operation with this library."""
    algorithm = get_algorithm(vector["algorithm"])
    inputs = vector["inputs"]
    operation = vector["operation"]

    if operation == "hash":
        return algorithm.digest(inputs["message"])
    if operation == "hmac":
        return hmac_digest(algorithm, inputs["key"], inputs["message"])
    if operation == "pbkdf2":
        return pbkdf2_hmac(
            algorithm,
            inputs["password"],
            inputs["salt"],
            inputs["iterations"],
            inputs["dk_len"],
        )
    raise ValueError(f"Unknown operation: {operation}")


def reference_vector(vector: dict[str, Any]) -> bytes:
    """Compute a vector's operation with the `cryptography` library."""
    reference_hash = _REFERENCE_HASHES[vector["algorithm"]]
    inputs = vector["inputs"]
    operation = vector["operation"]

    if operation == "hash":
        digest = hashes.Hash(reference_hash())
        digest.update(inputs["message"])
        return digest.finalize()
    if operation == "hmac":
        mac = crypto_hmac.HMAC(inputs["key"], reference_hash())
        mac.update(inputs["message"])
        return mac.finalize()
    if operation == "pbkdf2":
        kdf = PBKDF2HMAC(
            algorithm=reference_hash(),
            length=inputs["dk_len"],
            salt=inputs["salt"],
            iterations=inputs["iterations"],
        )
        return kdf.derive(inputs["password"])
    raise ValueError(f"Unknown operation: {operation}")


def generate_test_vectors() -> list[dict]:
    """
    Compute every test vector with this library and with the reference.

    Returns:
        List of vector dictionaries extended with "computed" and
        "reference" hex strings

    Example:
        >>> vectors = generate_test_vectors()
        >>> all(v["computed"] == v["expected"] for v in vectors)
        True
    """
    vectors = []
    for vector in TEST_VECTORS:
        vectors.append({
            **vector,
            "computed": to_hex(compute_vector(vector)),
            "reference": to_hex(reference_vector(vector)),
        })
    return vectors


def find_failures() -> list[dict]:
    """Return the vectors whose computed value disagrees with expected or reference."""
    return [
        vector
        for vector in generate_test_vectors()
        if not (vector["computed"] == vector["expected"] == vector["reference"])
    ]


def validate_implementation() -> bool:
    """
    Validate the implementation against all test vectors.

    Returns:
        True if every vector matches both its published value and the
        reference library, False otherwise
    """
    failures = find_failures()

    for vector in failures:
        logger.error(f"Test vector failed: {vector['description']}")
        logger.error(f"  Expected:  {vector['expected']}")
        logger.error(f"  Reference: {vector['reference']}")
        logger.error(f"  Got:       {vector['computed']}")

    if failures:
        return False

    logger.info(f"All {len(TEST_VECTORS)} test vectors passed")
    return True


def run_self_test(strict: bool = False) -> bool:
    """
    Run the known-answer self-test.

    Args:
        strict: Raise instead of returning False on failure

    Raises:
        SelfTestError: If strict and any vector fails
    """
    passed = validate_implementation()
    if strict and not passed:
        raise SelfTestError("vault_crypto known-answer self-test failed")
    return passed


def print_test_vectors() -> None:
    """Print every test vector with its computed and reference values."""
    print("\n" + "=" * 70)
    print("vault_crypto Test Vectors")
    print("=" * 70)

    for i, vector in enumerate(generate_test_vectors()):
        status = "✓" if vector["computed"] == vector["expected"] == vector["reference"] else "✗"
        print(f"\nVector {i}: {vector['description']}")
        print(f"  Expected:   {vector['expected']}")
        print(f"  Reference:  {vector['reference']}")
        print(f"  Computed:   {vector['computed']}  {status}")

    print("\n" + "=" * 70 + "\n")
