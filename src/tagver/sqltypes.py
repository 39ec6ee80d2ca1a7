# SPDX-License-Identifier: MIT
"""SQLAlchemy column type storing versions as text."""

from __future__ import annotations

from typing import Any, Optional, Union

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from .parser import parse_strict, parse_version
from .version import Version


class VersionType(TypeDecorator):
    """Store a Version in a VARCHAR column using its canonical form.

    Values are written with str(version) and read back through the parser,
    so the original spelling of a version is not preserved in the database.

    Example:
        version: Mapped[Version] = mapped_column(VersionType())
    """

    impl = String
    cache_ok = True

    def __init__(self, length: int = 255, strict: bool = False, **kwargs: Any):
        super().__init__(length=length, **kwargs)
        self.strict = strict

    def _parse(self, value: str) -> Version:
        return parse_strict(value) if self.strict else parse_version(value)

    def process_bind_param(
        self, value: Optional[Union[Version, str]], dialect: Any
    ) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            value = self._parse(value)
        elif self.strict and not value.is_strict:
            # A loose Version must survive the strict parse on load
            value = self._parse(str(value))
        return str(value)

    def process_result_value(self, value: Optional[str], dialect: Any) -> Optional[Version]:
        if value is None:
            return None
        return self._parse(value)

    @property
    def python_type(self) -> type:
        return Version
