"""Adapters between plain callables and :class:`Function2`.

Comparators and combinators may be supplied either as ordinary
two-argument callables or as :class:`~lambdava.core.protocols.Function2`
objects; the helpers here let calling code accept both.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from lambdava.core.protocols import Function2

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
T = TypeVar("T")

Comparator = Union[Callable[[T, T], int], Function2[T, T, int]]
"""A three-way comparison: negative, zero or positive."""


@dataclass(frozen=True, slots=True)
class CallableFunction2(Generic[A, B, R]):
    """A :class:`Function2` backed by a plain callable."""

    fn: Callable[[A, B], R]

    def execute(self, a: A, b: B) -> R:
        return self.fn(a, b)

    def __call__(self, a: A, b: B) -> R:
        return self.fn(a, b)


def function2(fn: Callable[[A, B], R]) -> CallableFunction2[A, B, R]:
    """Wrap *fn* so it satisfies :class:`Function2`.

    Usable as a decorator::

        @function2
        def add(a: int, b: int) -> int:
            return a + b

        add.execute(1, 2)  # 3
    """
    return CallableFunction2(fn)


def as_callable(fn: Function2[A, B, R] | Callable[[A, B], R]) -> Callable[[A, B], R]:
    """Return a plain two-argument callable for *fn*.

    Objects exposing ``execute`` are preferred over ``__call__`` so that a
    :class:`Function2` that also happens to be callable keeps its
    contract.
    """
    if isinstance(fn, Function2):
        return fn.execute
    if callable(fn):
        return fn
    raise TypeError(
        f"Expected a callable or an object with execute(a, b), got {type(fn).__name__}"
    )


def comparator_key(comparator: Comparator[T]) -> Callable[[T], Any]:
    """Turn a three-way *comparator* into a ``sorted()`` key function."""
    return functools.cmp_to_key(as_callable(comparator))
