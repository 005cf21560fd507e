# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Generic SHA-2 engine.

SHA-256 and SHA-512 share one Merkle-Damgard construction:
pad -> expand message schedule -> round-compress -> emit state big-endian.
The families differ only in word size, round count, constant tables and
rotation amounts, so both are instances of a single HashAlgorithm.
"""

from dataclasses import dataclass

from .constants import (
    SHA256_INITIAL_STATE,
    SHA256_ROUND_CONSTANTS,
    SHA256_ROUND_ROTATIONS,
    SHA256_SCHEDULE_ROTATIONS,
    SHA512_INITIAL_STATE,
    SHA512_ROUND_CONSTANTS,
    SHA512_ROUND_ROTATIONS,
    SHA512_SCHEDULE_ROTATIONS,
)

State = tuple[int, ...]
Rotations = tuple[tuple[int, int, int], tuple[int, int, int]]


@dataclass(frozen=True)
class HashAlgorithm:
    """
    Parameters of one SHA-2 family member.

    Attributes:
        name: Lowercase algorithm name (e.g., "sha256")
        word_size: Word size in bytes (4 for SHA-256, 8 for SHA-512)
        rounds: Compression rounds per block (64 or 80)
        round_constants: K table, one constant per round
        initial_state: The 8 initial hash words
        schedule_rotations: (rotr, rotr, shr) amounts for sigma0 and sigma1
        round_rotations: (rotr, rotr, rotr) amounts for Sigma0 and Sigma1
    """
    name: str
    word_size: int
    rounds: int
    round_constants: tuple[int, ...]
    initial_state: State
    schedule_rotations: Rotations
    round_rotations: Rotations

    def __post_init__(self) -> None:
        """Validate table sizes."""
        if len(self.round_constants) != self.rounds:
            raise ValueError(
                f"{self.name}: expected {self.rounds} round constants, "
                f"got {len(self.round_constants)}"
            )
        if len(self.initial_state) != 8:
            raise ValueError(
                f"{self.name}: expected 8 initial state words, got {len(self.initial_state)}"
            )

    @property
    def block_size(self) -> int:
        """Bytes consumed per compression (16 words)."""
        return 16 * self.word_size

    @property
    def digest_size(self) -> int:
        """Bytes of output (8 state words)."""
        return 8 * self.word_size

    @property
    def length_field_size(self) -> int:
        """Bytes of the trailing bit-length field (two words)."""
        return 2 * self.word_size

    @property
    def word_mask(self) -> int:
        return (1 << (8 * self.word_size)) - 1

    def pad(self, message: bytes, consumed: int = 0) -> bytes:
        """
        Apply Merkle-Damgard strengthening to the final part of a message.

        Appends 0x80, zero bytes up to the length field, and the total bit
        length as a big-endian integer of length_field_size bytes.

        Args:
            message: Trailing message bytes not yet compressed
            consumed: Bytes already absorbed (a multiple of block_size)

        Returns:
            Padded bytes, a multiple of block_size long
        """
        total = consumed + len(message)
        # Bit length is defined modulo 2^(8 * length_field_size)
        bit_length = (total * 8) & ((1 << (8 * self.length_field_size)) - 1)
        zero_count = (self.block_size - self.length_field_size - 1 - total) % self.block_size

        return (
            bytes(message)
            + b"\x80"
            + bytes(zero_count)
            + bit_length.to_bytes(self.length_field_size, byteorder="big")
        )

    def compress(self, state: State, block: bytes) -> State:
        """
        Run the compression function over a single block.

        Args:
            state: Current 8-word chaining state
            block: Exactly block_size bytes

        Returns:
            New chaining state
        """
        word_size = self.word_size
        bits = 8 * word_size
        mask = self.word_mask
        (s0_a, s0_b, s0_shift), (s1_a, s1_b, s1_shift) = self.schedule_rotations
        (r0_a, r0_b, r0_c), (r1_a, r1_b, r1_c) = self.round_rotations

        # rotr(x, n) == ((x >> n) | (x << (bits - n))) & mask, inlined below
        s0_a_l, s0_b_l = bits - s0_a, bits - s0_b
        s1_a_l, s1_b_l = bits - s1_a, bits - s1_b
        r0_a_l, r0_b_l, r0_c_l = bits - r0_a, bits - r0_b, bits - r0_c
        r1_a_l, r1_b_l, r1_c_l = bits - r1_a, bits - r1_b, bits - r1_c

        # Message schedule
        w = [
            int.from_bytes(block[i:i + word_size], byteorder="big")
            for i in range(0, self.block_size, word_size)
        ]
        for i in range(16, self.rounds):
            x = w[i - 15]
            y = w[i - 2]
            sigma0 = ((x >> s0_a) | (x << s0_a_l)) ^ ((x >> s0_b) | (x << s0_b_l))
            sigma1 = ((y >> s1_a) | (y << s1_a_l)) ^ ((y >> s1_b) | (y << s1_b_l))
            sigma0 = (sigma0 & mask) ^ (x >> s0_shift)
            sigma1 = (sigma1 & mask) ^ (y >> s1_shift)
            w.append((w[i - 16] + sigma0 + w[i - 7] + sigma1) & mask)

        a, b, c, d, e, f, g, h = state
        for k, wi in zip(self.round_constants, w):
            big_sigma1 = (
                ((e >> r1_a) | (e << r1_a_l))
                ^ ((e >> r1_b) | (e << r1_b_l))
                ^ ((e >> r1_c) | (e << r1_c_l))
            ) & mask
            ch = (e & f) ^ (~e & g)
            temp1 = (h + big_sigma1 + ch + k + wi) & mask
            big_sigma0 = (
                ((a >> r0_a) | (a << r0_a_l))
                ^ ((a >> r0_b) | (a << r0_b_l))
                ^ ((a >> r0_c) | (a << r0_c_l))
            ) & mask
            maj = (a & b) ^ (a & c) ^ (b & c)
            temp2 = (big_sigma0 + maj) & mask

            h = g
            g = f
            f = e
            e = (d + temp1) & mask
            d = c
            c = b
            b = a
            a = (temp1 + temp2) & mask

        return tuple(
            (old + new) & mask
            for old, new in zip(state, (a, b, c, d, e, f, g, h))
        )

    def absorb(self, state: State, data: bytes) -> State:
        """Compress whole blocks of data into state."""
        if len(data) % self.block_size != 0:
            raise ValueError(
                f"{self.name}: absorb needs a multiple of {self.block_size} bytes, got {len(data)}"
            )
        for offset in range(0, len(data), self.block_size):
            state = self.compress(state, data[offset:offset + self.block_size])
        return state

    def finish(self, state: State, tail: bytes, consumed: int = 0) -> bytes:
        """
        Pad and compress the final bytes, then serialize the state.

        Args:
            state: State after absorbing `consumed` bytes
            tail: Remaining message bytes
            consumed: Bytes already absorbed into state

        Returns:
            digest_size bytes
        """
        if consumed % self.block_size != 0:
            raise ValueError(
                f"{self.name}: consumed length must be block aligned, got {consumed}"
            )
        state = self.absorb(state, self.pad(tail, consumed))
        return b"".join(word.to_bytes(self.word_size, byteorder="big") for word in state)

    def digest(self, message: bytes) -> bytes:
        """
        Hash a complete message.

        Example:
            >>> SHA256.digest(b"abc").hex()[:16]
            'ba7816bf8f01cfea'
        """
        return self.finish(self.initial_state, message)


SHA256 = HashAlgorithm(
    name="sha256",
    word_size=4,
    rounds=64,
    round_constants=SHA256_ROUND_CONSTANTS,
    initial_state=SHA256_INITIAL_STATE,
    schedule_rotations=SHA256_SCHEDULE_ROTATIONS,
    round_rotations=SHA256_ROUND_ROTATIONS,
)

SHA512 = HashAlgorithm(
    name="sha512",
    word_size=8,
    rounds=80,
    round_constants=SHA512_ROUND_CONSTANTS,
    initial_state=SHA512_INITIAL_STATE,
    schedule_rotations=SHA512_SCHEDULE_ROTATIONS,
    round_rotations=SHA512_ROUND_ROTATIONS,
)

ALGORITHMS = {
    SHA256.name: SHA256,
    SHA512.name: SHA512,
}


def get_algorithm(name: str) -> HashAlgorithm:
    """
    Look up a hash algorithm by name.

    Raises:
        ValueError: If the name is not "sha256" or "sha512"
    """
    try:
        return ALGORITHMS[name.lower().replace("-", "")]
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name}") from None


def sha256_bytes(message: bytes) -> bytes:
    """
    Compute the SHA-256 digest of raw bytes.

    Args:
        message: Bytes to hash

    Returns:
        32 bytes (256 bits) of hash output

    Example:
        >>> len(sha256_bytes(b""))
        32
    """
    return SHA256.digest(message)


def sha512_bytes(message: bytes) -> bytes:
    """
    Compute the SHA-512 digest of raw bytes.

    Args:
        message: Bytes to hash

    Returns:
        64 bytes (512 bits) of hash output
    """
    return SHA512.digest(message)
