# SPDX-License-Identifier: MIT
"""Pydantic field types for versions.

Example:
    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: VersionField
    >>> Release(version="v1.7rc2").model_dump()
    {'version': '1.7.0-rc2'}
"""

from __future__ import annotations

from typing import Annotated, Any, Callable

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from .errors import InvalidVersionError
from .parser import parse_strict, parse_version
from .version import Version


def _validator(
    parse: Callable[[str], Version], strict: bool = False
) -> Callable[[Any], Version]:
    def validate(value: Any) -> Version:
        if isinstance(value, Version):
            if value.is_strict or not strict:
                return value
            value = str(value)
        if not isinstance(value, str):
            raise ValueError(f"Version must be a string, got {type(value).__name__}")
        try:
            return parse(value)
        except InvalidVersionError as e:
            raise ValueError(e.message) from e

    return validate


def _serialize(version: Version) -> str:
    return str(version)


VersionField = Annotated[
    Version,
    PlainValidator(_validator(parse_version)),
    PlainSerializer(_serialize, return_type=str),
    WithJsonSchema({"type": "string"}),
]

StrictVersionField = Annotated[
    Version,
    PlainValidator(_validator(parse_strict, strict=True)),
    PlainSerializer(_serialize, return_type=str),
    WithJsonSchema({"type": "string"}),
]
