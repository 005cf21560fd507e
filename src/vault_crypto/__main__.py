# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Main entry point for running vault_crypto as a module.

Allows running:
    python -m vault_crypto --print-vectors
"""

import argparse
import logging
import sys

from .config import settings
from .selftest import print_test_vectors, validate_implementation


def main(argv: list[str] | None = None) -> int:
    """Validate the implementation and optionally print test vectors."""
    parser = argparse.ArgumentParser(
        description="vault_crypto known-answer self-test",
    )
    parser.add_argument(
        '--print-vectors',
        action='store_true',
        help='Print every test vector with computed and reference values'
    )
    parser.add_argument(
        '--log-level',
        default=settings.log_level,
        help=f'Logging level (default: {settings.log_level})'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("Validating vault_crypto implementation...")
    passed = validate_implementation()

    if args.print_vectors:
        print_test_vectors()

    if passed:
        print("✓ Implementation validated")
        return 0

    print("✗ Implementation validation failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
