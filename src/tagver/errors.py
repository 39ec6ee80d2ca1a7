# SPDX-License-Identifier: MIT
"""Exception classes raised by the version parsers."""

from __future__ import annotations


class ErrorKind:
    """Error codes distinguishing why a version string was rejected."""

    EMPTY_INPUT = "EMPTY_INPUT"
    MALFORMED = "MALFORMED"
    NOT_STRICT = "NOT_STRICT"


class InvalidVersionError(Exception):
    """Raised when a string cannot be parsed into a Version.

    Attributes:
        kind: One of the ErrorKind codes
        version: The rejected input
        message: Human-readable reason
    """

    kind = ErrorKind.MALFORMED

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class EmptyVersionError(InvalidVersionError):
    """Input is empty or whitespace only."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, version: str):
        super().__init__(version, "Version string cannot be empty")


class MalformedVersionError(InvalidVersionError):
    """Input does not fit the permissive grammar."""

    kind = ErrorKind.MALFORMED


class NotStrictVersionError(InvalidVersionError):
    """Input is a valid loose version but breaks a strict-mode rule."""

    kind = ErrorKind.NOT_STRICT

    def __init__(self, version: str, message: str = ""):
        super().__init__(
            version,
            message or f"Version {version!r} is not a strict MAJOR[.MINOR[.PATCH]] version",
        )
