# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    SVG = "svg"
    JSON = "json"
    JSON_PRETTY = "json_pretty"


def format_number(value: float) -> str:
    """
    Compact, stable number text for attributes.

    Integers print without a decimal point; other values keep at most four
    decimals with trailing zeros removed. Negative zero prints as "0".
    """
    if float(value).is_integer():
        text = str(int(value))
    else:
        text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
