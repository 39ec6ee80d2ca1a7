# SPDX-License-Identifier: MIT
"""Parsing and ordering of loosely-structured version identifiers.

This package parses release tags such as "v1.2.3", "1.7rc2" or
"2.29.0.rc0.261.g7178c9af9c" into comparable Version values. A strict
grammar is available for MAJOR.MINOR.PATCH style versions.

Example:
    >>> from tagver import parse_version, parse_strict, compare
    >>>
    >>> version = parse_version("v1.2-beta.2+build.5")
    >>> version.segments
    (1, 2, 0)
    >>> version.prerelease
    'beta.2'
    >>> str(version)
    '1.2.0-beta.2+build.5'
    >>>
    >>> compare(parse_version("1.2-beta.2"), parse_version("1.2-beta.11"))
    -1
    >>> parse_strict("1.2.3") == parse_version("v1.2.3.0")
    True
"""

import logging

__version__ = "0.1.0"

from .errors import (
    EmptyVersionError,
    ErrorKind,
    InvalidVersionError,
    MalformedVersionError,
    NotStrictVersionError,
)
from .grammar import DEFAULT_GRAMMAR, Grammar
from .version import Version, format_version
from .compare import (
    compare,
    compare_prerelease,
    compare_segments,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    version_key,
)
from .parser import (
    is_valid_strict,
    is_valid_version,
    parse_strict,
    parse_version,
)
from .sorting import compare_versions, sort_versions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "ErrorKind",
    "InvalidVersionError",
    "EmptyVersionError",
    "MalformedVersionError",
    "NotStrictVersionError",
    # Grammar
    "Grammar",
    "DEFAULT_GRAMMAR",
    # Version value
    "Version",
    "format_version",
    # Parsing
    "parse_version",
    "parse_strict",
    "is_valid_version",
    "is_valid_strict",
    # Comparison
    "compare",
    "compare_segments",
    "compare_prerelease",
    "equal",
    "less_than",
    "greater_than",
    "less_than_or_equal",
    "greater_than_or_equal",
    "version_key",
    "compare_versions",
    "sort_versions",
]
