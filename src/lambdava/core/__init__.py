"""Core layer — pure value types and sequence helpers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Every value type is immutable.
"""

from lambdava.core.functions import CallableFunction2, as_callable, comparator_key, function2
from lambdava.core.pairs import DoublesPair, IntDoublePair, LongDoublePair, ObjectsPair
from lambdava.core.protocols import Function2, Pair
from lambdava.core.stream import FunctionalSequence, functional

__all__: list[str] = [
    "CallableFunction2",
    "DoublesPair",
    "Function2",
    "FunctionalSequence",
    "IntDoublePair",
    "LongDoublePair",
    "ObjectsPair",
    "Pair",
    "as_callable",
    "comparator_key",
    "function2",
    "functional",
]
