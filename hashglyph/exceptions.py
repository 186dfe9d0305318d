# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Exception hierarchy for hashglyph.

    HashglyphError (base)
    ├── InvalidVariant       unknown pattern name, rejected as a client error
    ├── MalformedInput       unparseable caller input (e.g. a color string)
    └── SourceFetchFailure   raster image could not be fetched or decoded

Only InvalidVariant is meant to reach the caller of ``compose``. The other
two are recovered inside the engine: a malformed color falls back to the
derived color, and a failed fetch degrades to a background-only portrait.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class HashglyphError(Exception):
    """
    Base exception for all hashglyph errors.

    Attributes:
        message: Human-readable description, safe to show to a client
        context: Extra debug details (logged, not meant for clients)
    """

    def __init__(
        self,
        message: str = "Generation failed",
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidVariant(HashglyphError, ValueError):
    """Raised when a pattern variant name is not registered."""

    def __init__(self, variant: str, available: Sequence[str] = ()) -> None:
        self.variant = variant
        self.available = tuple(available)
        message = f"Invalid variant {variant!r}"
        if self.available:
            message += f"; expected one of: {', '.join(self.available)}"
        super().__init__(message, {"variant": variant})


class MalformedInput(HashglyphError, ValueError):
    """Raised when a caller-supplied value cannot be parsed."""

    def __init__(self, field: str, value: Any, reason: str = "") -> None:
        self.field = field
        self.value = value
        message = f"Malformed {field}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, {"field": field, "value": value})


class SourceFetchFailure(HashglyphError):
    """Raised when a source raster image is unavailable or undecodable."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(
            f"Could not load source image {url!r}: {reason}",
            {"url": url},
        )
