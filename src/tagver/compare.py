# SPDX-License-Identifier: MIT
"""Version ordering.

Numeric segments are compared first, with the shorter core padded by zeros
so that 1.2 == 1.2.0.0. On a tie, a release outranks any pre-release, and
two pre-releases are compared identifier by identifier:

- numeric identifiers compare as integers (beta.2 < beta.11)
- numeric identifiers sort before alphanumeric ones (alpha.1 < alpha.beta)
- alphanumeric identifiers compare by code point (alpha < beta)
- if every shared identifier is equal, fewer identifiers sort first
  (beta < beta.3)

Build metadata and the original spelling are ignored.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .version import Version


def _sign(left, right) -> int:
    return -1 if left < right else 1


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def compare_segments(left: Sequence[int], right: Sequence[int]) -> int:
    """Compare two numeric cores, padding the shorter one with zeros.

    Returns:
        -1, 0 or 1
    """
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return _sign(a, b)
    return 0


def _compare_identifier(left: str, right: str) -> int:
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        a, b = int(left), int(right)
        return 0 if a == b else _sign(a, b)
    if left_numeric:
        return -1
    if right_numeric:
        return 1
    return 0 if left == right else _sign(left, right)


def compare_prerelease(left: str, right: str) -> int:
    """Compare two pre-release strings.

    An empty string means "no pre-release" and outranks any non-empty one.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    if left == right:
        return 0
    if not left:
        return 1  # Release > pre-release
    if not right:
        return -1  # Pre-release < release

    left_parts = left.split(".")
    right_parts = right.split(".")

    for a, b in zip(left_parts, right_parts):
        result = _compare_identifier(a, b)
        if result:
            return result

    if len(left_parts) != len(right_parts):
        return _sign(len(left_parts), len(right_parts))
    return 0


def compare(a: "Version", b: "Version") -> int:
    """Compare two versions.

    Either argument may come from the permissive or the strict parser.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b

    Examples:
        >>> from tagver import parse_version
        >>> compare(parse_version("1.2"), parse_version("1.2-beta"))
        1
        >>> compare(parse_version("v1.2"), parse_version("v1.2.0.0"))
        0
    """
    result = compare_segments(a.segments, b.segments)
    if result:
        return result
    return compare_prerelease(a.prerelease, b.prerelease)


def _require(a: Optional["Version"], b: Optional["Version"]) -> None:
    if a is None or b is None:
        raise TypeError("Cannot order a version against a missing version")


def equal(a: Optional["Version"], b: Optional["Version"]) -> bool:
    """Return True if both versions compare equal.

    Two missing versions are equal; a missing version never equals a
    present one.
    """
    if a is None or b is None:
        return a is None and b is None
    return compare(a, b) == 0


def less_than(a: "Version", b: "Version") -> bool:
    _require(a, b)
    return compare(a, b) < 0


def greater_than(a: "Version", b: "Version") -> bool:
    _require(a, b)
    return compare(a, b) > 0


def less_than_or_equal(a: "Version", b: "Version") -> bool:
    _require(a, b)
    return compare(a, b) <= 0


def greater_than_or_equal(a: "Version", b: "Version") -> bool:
    _require(a, b)
    return compare(a, b) >= 0


def version_key(version: "Version") -> tuple:
    """Return a sort key that orders exactly like compare().

    Trailing zero segments are dropped so that padded and unpadded cores
    produce the same key, which also makes the key usable as a hash.

    Examples:
        >>> from tagver import parse_version
        >>> [str(v) for v in sorted(map(parse_version, ["1.0", "1.0-rc.1"]), key=version_key)]
        ['1.0.0-rc.1', '1.0.0']
    """
    segments = list(version.segments)
    while segments and segments[-1] == 0:
        segments.pop()

    # Release (1,) sorts after any pre-release (0, ...)
    if not version.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in version.prerelease.split("."):
            if _is_numeric(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (tuple(segments), prerelease_key)
