"""Custom exception hierarchy for lambdava.

Every error raised by the library on its own behalf inherits from
:class:`LambdavaError`.  Exceptions raised by caller-supplied callables
(comparators, :class:`~lambdava.core.protocols.Function2`
implementations) are never wrapped; they propagate unchanged.

Hierarchy
---------
LambdavaError
├── InvalidNumericConversionError  (also ValueError)
├── UnorderableElementsError       (also TypeError)
├── SerializationVersionError
└── DependencyMissingError
"""

from __future__ import annotations


class LambdavaError(Exception):
    """Base exception for all lambdava errors.

    The CLI error boundary renders the message and, when present, the
    hint without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Pair construction -----------------------------------------------------

class InvalidNumericConversionError(LambdavaError, ValueError):
    """Raised when a value cannot occupy a numeric pair slot.

    Absent values, non-numeric values and out-of-range integers are all
    rejected; nothing is truncated or replaced with a default.
    """


class SerializationVersionError(LambdavaError):
    """Raised when a pickled pair carries an unknown format-version tag."""


# --- Sorting ---------------------------------------------------------------

class UnorderableElementsError(LambdavaError, TypeError):
    """Raised when natural ordering is requested on unorderable elements."""


# --- Environment -----------------------------------------------------------

class DependencyMissingError(LambdavaError):
    """Raised when an optional runtime dependency is not installed."""
