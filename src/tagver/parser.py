# SPDX-License-Identifier: MIT
"""Version string parsing.

Two grammars are supported:

- parse_version accepts loose release tags: an optional 'v', any number of
  dotted numeric segments, pre-release text glued to the last segment
  (1.7rc2) or introduced by '-' or '.', and '+' build metadata.
- parse_strict accepts MAJOR[.MINOR[.PATCH]] with an optional SemVer
  pre-release and build metadata.
"""

from __future__ import annotations

import logging

from .errors import (
    EmptyVersionError,
    InvalidVersionError,
    MalformedVersionError,
    NotStrictVersionError,
)
from .grammar import DEFAULT_GRAMMAR, Grammar
from .version import Version

logger = logging.getLogger(__name__)


def _check_input(version_string: object) -> str:
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string.strip():
        logger.debug("Rejected empty version string %r", version_string)
        raise EmptyVersionError(version_string)
    return version_string


def _malformed(version_string: str, reason: str) -> MalformedVersionError:
    logger.debug("Rejected version %r: %s", version_string, reason)
    return MalformedVersionError(version_string, f"Malformed version {version_string!r}: {reason}")


def _to_segment(version_string: str, digits: str, grammar: Grammar) -> int:
    # Bound the digit count before int() so huge inputs fail fast
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(grammar.max_segment)) or int(significant) > grammar.max_segment:
        raise _malformed(version_string, f"segment {digits} exceeds {grammar.max_segment}")
    return int(significant)


def _scan_core(version_string: str, pos: int, grammar: Grammar) -> tuple[list[int], int]:
    """Consume dot-separated digit runs starting at pos.

    Stops at the first '.' that is not followed by a digit, leaving it for
    the pre-release scan.
    """
    match = grammar.digits.match(version_string, pos)
    if match is None:
        raise _malformed(version_string, "no numeric segment")

    segments = []
    while True:
        segments.append(_to_segment(version_string, match.group(), grammar))
        pos = match.end()
        if not version_string.startswith(".", pos):
            break
        match = grammar.digits.match(version_string, pos + 1)
        if match is None:
            break
    return segments, pos


def _scan_suffix(version_string: str, pos: int, grammar: Grammar) -> tuple[str, str]:
    """Split the text after the numeric core into (prerelease, metadata)."""
    head, plus, metadata = version_string[pos:].partition("+")

    if plus and not grammar.metadata.fullmatch(metadata):
        raise _malformed(version_string, f"invalid build metadata {metadata!r}")

    if not head:
        return "", metadata
    if head == "-":
        # "1.0-" keeps the dash itself as the pre-release
        prerelease = head
    elif head[0] in "-.":
        prerelease = head[1:]
    else:
        prerelease = head

    if not grammar.prerelease.fullmatch(prerelease):
        raise _malformed(version_string, f"invalid pre-release {head!r}")
    return prerelease, metadata


def parse_version(version_string: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Version:
    """Parse a loose version string into a Version object.

    Args:
        version_string: A release tag such as "v1.2.3", "1.7rc2" or
            "2.28.0.618+gf4bc123cb7"
        grammar: Parsing limits and patterns

    Returns:
        A Version with segments padded to grammar.min_segments

    Raises:
        EmptyVersionError: If the string is empty or whitespace only
        MalformedVersionError: If the string does not fit the grammar

    Examples:
        >>> parse_version("1.7rc2").prerelease
        'rc2'
        >>> parse_version("2.29.0.rc0.261.g7178c9af9c").segments
        (2, 29, 0)
        >>> str(parse_version("17.03.0-ce"))
        '17.3.0-ce'
    """
    version_string = _check_input(version_string)

    pos = 1 if version_string[0] in "vV" else 0
    segments, pos = _scan_core(version_string, pos, grammar)
    prerelease, metadata = _scan_suffix(version_string, pos, grammar)

    return Version(
        segments=grammar.pad(segments),
        prerelease=prerelease,
        metadata=metadata,
        original=version_string,
    )


def parse_strict(version_string: str, grammar: Grammar = DEFAULT_GRAMMAR) -> Version:
    """Parse a strict MAJOR[.MINOR[.PATCH]][-prerelease][+metadata] version.

    Missing MINOR and PATCH default to 0.

    Raises:
        EmptyVersionError: If the string is empty or whitespace only
        NotStrictVersionError: If parse_version would accept the string but
            the strict grammar does not (e.g., "1.2.3.4", "1.7rc2", "1.0.0-01")
        MalformedVersionError: If neither grammar accepts the string

    Examples:
        >>> parse_strict("v1.2-rc.1").segments
        (1, 2, 0)
    """
    version_string = _check_input(version_string)

    match = grammar.strict.fullmatch(version_string)
    if match is None:
        # Raises the loose error if the input is not even a loose version
        parse_version(version_string, grammar)
        logger.debug("Rejected non-strict version %r", version_string)
        raise NotStrictVersionError(version_string)

    segments = [
        _to_segment(version_string, digits, grammar) for digits in match.group("core").split(".")
    ]
    return Version(
        segments=grammar.pad(segments),
        prerelease=match.group("prerelease") or "",
        metadata=match.group("metadata") or "",
        original=version_string,
        is_strict=True,
    )


def is_valid_version(version_string: str, grammar: Grammar = DEFAULT_GRAMMAR) -> bool:
    """Check if a string is accepted by parse_version.

    Examples:
        >>> is_valid_version("v1.7rc2")
        True
        >>> is_valid_version("foo1.2.3")
        False
    """
    try:
        parse_version(version_string, grammar)
    except InvalidVersionError:
        return False
    return True


def is_valid_strict(version_string: str, grammar: Grammar = DEFAULT_GRAMMAR) -> bool:
    """Check if a string is accepted by parse_strict.

    Examples:
        >>> is_valid_strict("1.2.3")
        True
        >>> is_valid_strict("1.2.3.4")
        False
    """
    try:
        parse_strict(version_string, grammar)
    except InvalidVersionError:
        return False
    return True
