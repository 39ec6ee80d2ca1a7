# SPDX-License-Identifier: MIT
"""Unit tests for the SQLAlchemy version column type."""

from typing import Optional

import pytest
from sqlalchemy import Integer, create_engine, select, text
from sqlalchemy.exc import StatementError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from tagver import MalformedVersionError, NotStrictVersionError, Version, parse_version
from tagver.sqltypes import VersionType


class Base(DeclarativeBase):
    """Base class for test models."""

    pass


class Release(Base):
    """Release row with a loose and a strict version column."""

    __tablename__ = "releases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    version: Mapped[Version] = mapped_column(VersionType())
    minimum: Mapped[Optional[Version]] = mapped_column(VersionType(strict=True), nullable=True)


@pytest.fixture
def session():
    """Create an in-memory SQLite session with the schema in place."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


class TestVersionType:
    """Tests for VersionType."""

    def test_round_trip(self, session):
        """Test that a Version is stored and loaded back."""
        session.add(Release(id=1, version=parse_version("v1.7rc2+build.1")))
        session.commit()
        session.expunge_all()

        release = session.scalars(select(Release)).one()
        assert isinstance(release.version, Version)
        assert release.version == parse_version("1.7rc2")
        assert release.version.metadata == "build.1"
        assert release.minimum is None

    def test_stores_canonical_form(self, session):
        """Test that the column holds the canonical string."""
        session.add(Release(id=1, version=parse_version("v17.03.0-ce"), minimum="1.2"))
        session.commit()

        row = session.execute(text("SELECT version, minimum FROM releases")).one()
        assert tuple(row) == ("17.3.0-ce", "1.2.0")

    def test_strict_column_loads_strict(self, session):
        """Test that a strict column parses with the strict grammar."""
        session.add(Release(id=1, version="1.0", minimum="1.2"))
        session.commit()
        session.expunge_all()

        release = session.scalars(select(Release)).one()
        assert release.minimum.is_strict is True
        assert release.version.is_strict is False

    def test_bind_rejects_invalid(self):
        """Test that invalid strings are rejected before reaching the database."""
        with pytest.raises(MalformedVersionError):
            VersionType().process_bind_param("foo", None)
        with pytest.raises(NotStrictVersionError):
            VersionType(strict=True).process_bind_param("1.2.3.4", None)

    def test_strict_column_rejects_loose_version(self, session):
        """Test that a loose Version outside the strict grammar is not written."""
        with pytest.raises(NotStrictVersionError):
            VersionType(strict=True).process_bind_param(parse_version("1.2.3.4"), None)

        session.add(Release(id=1, version="1.0", minimum=parse_version("1.2.3.4")))
        with pytest.raises(StatementError):
            session.commit()
        session.rollback()
        assert session.scalars(select(Release)).all() == []

    def test_strict_column_accepts_loose_version_in_strict_form(self, session):
        """Test that a loose Version whose canonical form is strict is stored."""
        session.add(Release(id=1, version="1.0", minimum=parse_version("v1.2-rc.1")))
        session.commit()
        session.expunge_all()

        release = session.scalars(select(Release)).one()
        assert release.minimum == parse_version("1.2.0-rc.1")
        assert release.minimum.is_strict is True

    def test_none_passes_through(self):
        """Test that NULL is preserved both ways."""
        column_type = VersionType()
        assert column_type.process_bind_param(None, None) is None
        assert column_type.process_result_value(None, None) is None

    def test_python_type(self):
        """Test the reported Python type."""
        assert VersionType().python_type is Version
