# SPDX-License-Identifier: MIT
"""The parsed, comparable version value.

A Version is produced by parse_version or parse_strict and never changes
afterwards. Equality, hashing and ordering all go through the comparator in
tagver.compare, so build metadata and the original spelling never affect
how two versions relate.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .compare import compare, version_key
from .grammar import DEFAULT_GRAMMAR

_UINT64_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed version identifier.

    Attributes:
        segments: Numeric core, most significant first (e.g., (1, 2, 0))
        prerelease: Pre-release text without its marker (e.g., "beta.2"), or ""
        metadata: Build metadata without the '+' (e.g., "build.5"), or ""
        original: The exact string that was parsed
        is_strict: True when produced by the strict grammar
    """

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""
    original: str = ""
    is_strict: bool = False

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        if not segments:
            raise ValueError("Version requires at least one numeric segment")
        for segment in segments:
            if not isinstance(segment, int) or isinstance(segment, bool):
                raise ValueError(f"Segment {segment!r} is not an integer")
            if segment < 0 or segment > _UINT64_MAX:
                raise ValueError(f"Segment {segment} is outside the unsigned 64-bit range")
        if not isinstance(self.prerelease, str) or (
            self.prerelease and not DEFAULT_GRAMMAR.prerelease.fullmatch(self.prerelease)
        ):
            raise ValueError(f"Invalid pre-release {self.prerelease!r}")
        if not isinstance(self.metadata, str) or (
            self.metadata and not DEFAULT_GRAMMAR.metadata.fullmatch(self.metadata)
        ):
            raise ValueError(f"Invalid build metadata {self.metadata!r}")
        object.__setattr__(self, "segments", segments)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash(version_key(self))

    def segments64(self) -> list[int]:
        """Return the numeric segments as a new list.

        Each call builds a fresh list, so callers may modify the result
        without affecting this version.
        """
        return list(self.segments)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease != ""

    @property
    def base_version(self) -> str:
        """Return the numeric core without pre-release or build metadata."""
        return _join(self.segments)

    def core(self) -> "Version":
        """Return a copy of this version with pre-release and metadata removed.

        The copy was never parsed, so its original is set to its own
        canonical form (e.g., "1.2.0" for "v1.2-beta+build").
        """
        return replace(self, prerelease="", metadata="", original=self.base_version)


def _join(segments: Iterable[int]) -> str:
    return ".".join(str(segment) for segment in segments)


def format_version(version: Version) -> str:
    """Render a version in canonical form.

    Segments are printed as plain integers, so zero-padded input such as
    "17.03.0-ce" comes back as "17.3.0-ce". The 'v' prefix is never emitted.

    Examples:
        >>> format_version(Version((1, 2, 0), prerelease="beta"))
        '1.2.0-beta'
    """
    text = _join(version.segments)
    if version.prerelease:
        text += f"-{version.prerelease}"
    if version.metadata:
        text += f"+{version.metadata}"
    return text
