"""lambdava — small functional-programming utility kit.

Immutable pairs, a two-argument function contract, and a fluent
sequence wrapper with sorting helpers.
"""

from lambdava.core.functions import function2
from lambdava.core.pairs import DoublesPair, IntDoublePair, LongDoublePair, ObjectsPair
from lambdava.core.protocols import Function2, Pair
from lambdava.core.stream import FunctionalSequence, functional
from lambdava.version import __version__

__all__: list[str] = [
    "DoublesPair",
    "Function2",
    "FunctionalSequence",
    "IntDoublePair",
    "LongDoublePair",
    "ObjectsPair",
    "Pair",
    "__version__",
    "function2",
    "functional",
]
