# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Initials and bitmap fonts for the text-bearing variants.

Fonts are keyed by uppercase A-Z. Each glyph is a tuple of row strings
where "1" is a lit cell. Any other character renders as the "?" glyph.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

PLACEHOLDER = "?"


def initials_of(name: str) -> str:
    """
    Up to two initials from a name.

    The first letter of the first whitespace-separated token, plus the first
    letter of the second token when there is one, uppercased. Characters
    that are not printable (controls, lone surrogates) are dropped first.
    Blank names give "?".

    Example:
        >>> initials_of("Alex Morgan")
        'AM'
        >>> initials_of("Madonna")
        'M'
    """
    parts = [
        token for token in (
            "".join(ch for ch in part if ch.isprintable()) for part in name.split()
        )
        if token
    ]
    if not parts:
        return PLACEHOLDER
    initials = parts[0][0]
    if len(parts) > 1:
        initials += parts[1][0]
    return initials.upper()


# 5 columns x 7 rows, for the LED dot-matrix variant
DOT_FONT: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "A": ("01110", "10001", "10001", "11111", "10001", "10001", "10001"),
    "B": ("11110", "10001", "10001", "11110", "10001", "10001", "11111"),
    "C": ("01111", "10000", "10000", "10000", "10000", "10000", "01111"),
    "D": ("11110", "10001", "10001", "10001", "10001", "10001", "11110"),
    "E": ("11111", "10000", "10000", "11110", "10000", "10000", "11111"),
    "F": ("11111", "10000", "10000", "11110", "10000", "10000", "10000"),
    "G": ("01111", "10000", "10000", "10111", "10001", "10001", "01111"),
    "H": ("10001", "10001", "10001", "11111", "10001", "10001", "10001"),
    "I": ("01110", "00100", "00100", "00100", "00100", "00100", "01110"),
    "J": ("00111", "00001", "00001", "00001", "00001", "10001", "01110"),
    "K": ("10001", "10010", "10100", "11000", "10100", "10010", "10001"),
    "L": ("10000", "10000", "10000", "10000", "10000", "10000", "11111"),
    "M": ("10001", "11011", "10101", "10101", "10001", "10001", "10001"),
    "N": ("10001", "11001", "10101", "10011", "10001", "10001", "10001"),
    "O": ("01110", "10001", "10001", "10001", "10001", "10001", "01110"),
    "P": ("11110", "10001", "10001", "11110", "10000", "10000", "10000"),
    "Q": ("01110", "10001", "10001", "10001", "10001", "10010", "01101"),
    "R": ("11110", "10001", "10001", "11110", "10100", "10010", "10001"),
    "S": ("01111", "10000", "10000", "01110", "00001", "00001", "11110"),
    "T": ("11111", "00100", "00100", "00100", "00100", "00100", "00100"),
    "U": ("10001", "10001", "10001", "10001", "10001", "10001", "01110"),
    "V": ("10001", "10001", "10001", "10001", "10001", "01010", "00100"),
    "W": ("10001", "10001", "10001", "10101", "10101", "11011", "10001"),
    "X": ("10001", "10001", "01010", "00100", "01010", "10001", "10001"),
    "Y": ("10001", "10001", "10001", "01010", "00100", "00100", "00100"),
    "Z": ("11111", "00001", "00010", "00100", "01000", "10000", "11111"),
    "?": ("01110", "10001", "00010", "00100", "00100", "00000", "00100"),
})

# 5 columns x 5 rows, for the terminal block variant
BLOCK_FONT: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "A": ("01110", "10001", "11111", "10001", "10001"),
    "B": ("11110", "10001", "11110", "10001", "11110"),
    "C": ("01111", "10000", "10000", "10000", "01111"),
    "D": ("11110", "10001", "10001", "10001", "11110"),
    "E": ("11111", "10000", "11110", "10000", "11111"),
    "F": ("11111", "10000", "11110", "10000", "10000"),
    "G": ("01111", "10000", "10011", "10001", "01111"),
    "H": ("10001", "10001", "11111", "10001", "10001"),
    "I": ("01110", "00100", "00100", "00100", "01110"),
    "J": ("00111", "00001", "00001", "10001", "01110"),
    "K": ("10001", "10010", "11000", "10010", "10001"),
    "L": ("10000", "10000", "10000", "10000", "11111"),
    "M": ("10001", "11011", "10101", "10001", "10001"),
    "N": ("10001", "11001", "10101", "10011", "10001"),
    "O": ("01110", "10001", "10001", "10001", "01110"),
    "P": ("11110", "10001", "11110", "10000", "10000"),
    "Q": ("01110", "10001", "10001", "10010", "01101"),
    "R": ("11110", "10001", "11110", "10010", "10001"),
    "S": ("01111", "10000", "01110", "00001", "11110"),
    "T": ("11111", "00100", "00100", "00100", "00100"),
    "U": ("10001", "10001", "10001", "10001", "01110"),
    "V": ("10001", "10001", "10001", "01010", "00100"),
    "W": ("10001", "10001", "10101", "11011", "10001"),
    "X": ("10001", "01010", "00100", "01010", "10001"),
    "Y": ("10001", "01010", "00100", "00100", "00100"),
    "Z": ("11111", "00010", "00100", "01000", "11111"),
    "?": ("01110", "10001", "00100", "00000", "00100"),
})


def glyph_for(font: Mapping[str, tuple[str, ...]], char: str) -> tuple[str, ...]:
    """The bitmap for ``char``, or the placeholder glyph if unsupported."""
    return font.get(char, font[PLACEHOLDER])


def lit_cells(glyph: tuple[str, ...]) -> list[tuple[int, int]]:
    """(row, col) positions of the lit cells of a glyph, row-major."""
    return [
        (row, col)
        for row, bits in enumerate(glyph)
        for col, bit in enumerate(bits)
        if bit == "1"
    ]
