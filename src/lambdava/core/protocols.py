"""Protocols (interfaces) shared by the core layer.

These define structural contracts only.  Concrete pair variants satisfy
:class:`Pair` without inheriting from it, and any object with a
matching ``execute`` method satisfies :class:`Function2`.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar, runtime_checkable

A_co = TypeVar("A_co", covariant=True)
B_co = TypeVar("B_co", covariant=True)
A_contra = TypeVar("A_contra", contravariant=True)
B_contra = TypeVar("B_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class Pair(Protocol[A_co, B_co]):
    """Contract for an immutable two-element value.

    When treated as a key-value association, ``first`` is the key and
    ``second`` is the value.  Implementations must keep both slots
    fixed for their whole lifetime.
    """

    @property
    def first(self) -> A_co:
        """The first element, may be ``None`` in the generic variant."""
        ...  # pragma: no cover

    @property
    def second(self) -> B_co:
        """The second element, may be ``None`` in the generic variant."""
        ...  # pragma: no cover

    def to_list(self) -> list[object]:
        """Return a new ``[first, second]`` list."""
        ...  # pragma: no cover

    def __iter__(self) -> Iterator[object]:
        ...  # pragma: no cover


@runtime_checkable
class Function2(Protocol[A_contra, B_contra, R_co]):
    """Contract for a function taking two parameters.

    Nothing is guaranteed about side effects; the contract only lets
    calling code accept interchangeable two-argument behaviours, such as
    comparators or combinators, as values.
    """

    def execute(self, a: A_contra, b: B_contra) -> R_co:
        """Execute the behaviour of the function.

        Parameters
        ----------
        a:
            The first parameter.
        b:
            The second parameter.
        """
        ...  # pragma: no cover
