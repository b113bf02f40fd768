"""Fluent sequence wrapper with sorting helpers.

:class:`FunctionalSequence` snapshots the wrapped elements into a tuple,
so neither the source iterable nor an existing wrapper is ever changed.
Every operation returns a **new** wrapper, which allows chaining::

    functional(["z", "d", "a"]).sort().as_list()  # ["a", "d", "z"]

Ordering is delegated to :func:`sorted`, which is stable: elements that
compare equal keep their original relative order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from lambdava.core.functions import Comparator, comparator_key
from lambdava.exceptions import UnorderableElementsError
from lambdava.logger import logger

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FunctionalSequence(Generic[T]):
    """Immutable, ordered wrapper around a sequence of elements."""

    elements: tuple[T, ...]

    def __len__(self) -> int:
        return len(self.elements)

    def __bool__(self) -> bool:
        return len(self.elements) > 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def as_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self.elements)

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort(self, *, reverse: bool = False) -> FunctionalSequence[T]:
        """Return a new wrapper ordered by the elements' natural ordering.

        Raises
        ------
        UnorderableElementsError
            If the elements do not support ``<`` between each other.
        """
        logger.debug("Natural sort of %d elements (reverse=%s)", len(self.elements), reverse)
        try:
            ordered = sorted(self.elements, reverse=reverse)  # type: ignore[type-var]
        except TypeError as exc:
            raise UnorderableElementsError(
                f"Elements have no natural ordering: {exc}",
                hint="Use sort_by() with an explicit comparator.",
            ) from exc
        return FunctionalSequence(tuple(ordered))

    def sort_by(self, comparator: Comparator[T]) -> FunctionalSequence[T]:
        """Return a new wrapper ordered by *comparator*.

        *comparator* is either a plain ``(a, b) -> int`` callable or a
        :class:`~lambdava.core.protocols.Function2`.  It must describe a
        total order; violations are not detected.  Exceptions raised by
        the comparator propagate unchanged.
        """
        logger.debug("Comparator sort of %d elements", len(self.elements))
        ordered = sorted(self.elements, key=comparator_key(comparator))
        return FunctionalSequence(tuple(ordered))


def functional(elements: Iterable[T]) -> FunctionalSequence[T]:
    """Wrap *elements* in a :class:`FunctionalSequence`."""
    return FunctionalSequence(tuple(elements))
