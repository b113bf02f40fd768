"""Smoke tests — version, exception hierarchy, exit codes, public API."""

from __future__ import annotations

import pytest

import lambdava
from lambdava import __version__
from lambdava.cli import exit_codes
from lambdava.exceptions import (
    DependencyMissingError,
    InvalidNumericConversionError,
    LambdavaError,
    SerializationVersionError,
    UnorderableElementsError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidNumericConversionError,
            UnorderableElementsError,
            SerializationVersionError,
            DependencyMissingError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[LambdavaError]
    ) -> None:
        assert issubclass(exc_class, LambdavaError)

    def test_builtin_compatibility(self) -> None:
        assert issubclass(InvalidNumericConversionError, ValueError)
        assert issubclass(UnorderableElementsError, TypeError)

    def test_hint_is_stored(self) -> None:
        err = LambdavaError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert LambdavaError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicAPI:
    def test_exports_resolve(self) -> None:
        for name in lambdava.__all__:
            assert hasattr(lambdava, name)

    def test_top_level_usage(self) -> None:
        assert str(lambdava.ObjectsPair.of(1, 2)) == "(1, 2)"
        assert lambdava.functional([2, 1]).sort().as_list() == [1, 2]
