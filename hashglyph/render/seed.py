# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Seed derivation.

A seed is the 16-byte MD5 digest of the input text. Generators treat those
bytes as a fixed set of dice: each decision reads one byte at a documented
offset and reduces it with a modulus. The same byte may feed several
unrelated decisions, which is how 16 bytes drive dozens of choices.

Offsets wrap modulo 16, so ``seed[i + 10]`` is always valid.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

SEED_LENGTH = 16


@dataclass(frozen=True, slots=True)
class Seed:
    """
    Immutable 16-byte seed.

    Attributes:
        digest: The raw bytes (always 16 long)
    """
    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != SEED_LENGTH:
            raise ValueError(
                f"Seed must be {SEED_LENGTH} bytes, got {len(self.digest)}"
            )

    def __getitem__(self, offset: int) -> int:
        return self.digest[offset % SEED_LENGTH]

    def __len__(self) -> int:
        return SEED_LENGTH

    def draw(self, offset: int, modulus: int) -> int:
        """The byte at ``offset`` reduced to ``[0, modulus)``."""
        if modulus <= 0:
            raise ValueError(f"Modulus must be positive, got {modulus}")
        return self[offset] % modulus

    def unit(self, offset: int) -> float:
        """The byte at ``offset`` scaled to [0, 1]."""
        return self[offset] / 255.0

    def word(self, offset: int) -> int:
        """Big-endian 16-bit value of bytes ``offset`` and ``offset + 1``."""
        return (self[offset] << 8) | self[offset + 1]

    def pick(self, options: Sequence[T], offset: int) -> T:
        """Choose one of ``options`` by the byte at ``offset``."""
        return options[self.draw(offset, len(options))]

    def hexdigest(self, start: int = 0, stop: int = SEED_LENGTH) -> str:
        """Hex string of a byte slice, for stable element ids."""
        return self.digest[start:stop].hex()


def derive_seed(text: str, salt: str = "") -> Seed:
    """
    Derive a seed from text.

    Always succeeds; the empty string hashes like any other input.

    Args:
        text: Input name or identifier
        salt: Suffix appended before hashing; "2", "3", ... give decorrelated
            seeds (and therefore decorrelated colors) for the same name

    Returns:
        Seed of 16 bytes
    """
    data = (text + salt).encode("utf-8", errors="surrogatepass")
    return Seed(hashlib.md5(data, usedforsecurity=False).digest())
