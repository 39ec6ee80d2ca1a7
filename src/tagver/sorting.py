# SPDX-License-Identifier: MIT
"""Comparing and sorting versions given as strings or Version objects."""

from __future__ import annotations

from typing import Iterable, Union

from .compare import compare, version_key
from .parser import parse_strict, parse_version
from .version import Version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike, strict: bool = False) -> Version:
    if isinstance(version, Version):
        return version
    return parse_strict(version) if strict else parse_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions, parsing strings with the loose grammar.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.7rc2", "1.7")
        -1
        >>> compare_versions("v1.2+foo", "1.2.0+bar")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def sort_versions(
    versions: Iterable[VersionLike],
    reverse: bool = False,
    strict: bool = False,
) -> list[Version]:
    """Parse and sort versions from lowest to highest.

    Args:
        versions: Version strings or Version objects
        reverse: Sort from highest to lowest instead
        strict: Parse strings with parse_strict instead of parse_version

    Returns:
        A new list of Version objects. Versions that compare equal keep
        their input order.

    Raises:
        InvalidVersionError: If any version string is invalid

    Examples:
        >>> [str(v) for v in sort_versions(["1.1", "0.7.1", "1.4-beta", "1.4", "1.2"])]
        ['0.7.1', '1.1.0', '1.2.0', '1.4.0-beta', '1.4.0']
    """
    parsed = [_coerce(version, strict) for version in versions]
    return sorted(parsed, key=version_key, reverse=reverse)
