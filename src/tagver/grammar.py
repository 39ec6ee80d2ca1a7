# SPDX-License-Identifier: MIT
"""Grammar settings and compiled patterns shared by the parsers.

A Grammar is built once and passed to the parse functions. It holds no
mutable state, so a single instance can serve any number of threads.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Characters allowed inside a loose pre-release identifier
_LOOSE_IDENTIFIER = r"[0-9A-Za-z~-]+"

# SemVer pre-release identifier: 0, a number without leading zero, or a
# token with at least one non-digit
_STRICT_IDENTIFIER = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"

# Build metadata: anything printable except whitespace and '+'
_METADATA = r"[^\s+\x00-\x1f\x7f]+"


@dataclass(frozen=True)
class Grammar:
    """Limits and compiled patterns for version parsing.

    Attributes:
        max_segment: Largest value a numeric segment may hold
        min_segments: Parsed cores shorter than this are padded with zeros
        strict_max_segments: Most numeric segments the strict grammar accepts
    """

    max_segment: int = 2**64 - 1
    min_segments: int = 3
    strict_max_segments: int = 3

    digits: re.Pattern = field(init=False, repr=False, compare=False)
    prerelease: re.Pattern = field(init=False, repr=False, compare=False)
    metadata: re.Pattern = field(init=False, repr=False, compare=False)
    strict: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 0 <= self.max_segment <= 2**64 - 1:
            raise ValueError("max_segment must fit in an unsigned 64-bit integer")
        if self.min_segments < 1:
            raise ValueError("min_segments must be at least 1")
        if self.strict_max_segments < 1:
            raise ValueError("strict_max_segments must be at least 1")

        # Frozen dataclass: derived fields are set through object.__setattr__
        object.__setattr__(self, "digits", re.compile(r"[0-9]+"))
        object.__setattr__(
            self,
            "prerelease",
            re.compile(rf"{_LOOSE_IDENTIFIER}(?:\.{_LOOSE_IDENTIFIER})*"),
        )
        object.__setattr__(self, "metadata", re.compile(_METADATA))
        object.__setattr__(
            self,
            "strict",
            re.compile(
                r"[vV]?"
                rf"(?P<core>[0-9]+(?:\.[0-9]+){{0,{self.strict_max_segments - 1}}})"
                rf"(?:-(?P<prerelease>{_STRICT_IDENTIFIER}(?:\.{_STRICT_IDENTIFIER})*))?"
                rf"(?:\+(?P<metadata>{_METADATA}))?"
            ),
        )

    def pad(self, segments: list[int]) -> tuple[int, ...]:
        """Return segments as a tuple padded with zeros to min_segments."""
        missing = self.min_segments - len(segments)
        if missing > 0:
            segments = segments + [0] * missing
        return tuple(segments)


DEFAULT_GRAMMAR = Grammar()
