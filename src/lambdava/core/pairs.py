"""Immutable pair value family.

One generic variant and three numeric variants, all **frozen**,
slotted dataclasses satisfying :class:`~lambdava.core.protocols.Pair`:

* :class:`ObjectsPair`: any two objects, either may be ``None``.
* :class:`DoublesPair`: ``float`` / ``float``.
* :class:`IntDoublePair`: signed 32-bit ``int`` / ``float``.
* :class:`LongDoublePair`: signed 64-bit ``int`` / ``float``.

Shared contract
---------------
* Equality is structural and only holds within one variant, so an
  ``IntDoublePair`` never equals a ``LongDoublePair`` with the same
  contents.  Doubles compare by exact bit pattern.
* ``hash()`` is the XOR of the element hashes; ``None`` contributes 0.
* ``str()`` renders ``"(first, second)"``.
* Numeric slots reject anything they cannot represent with
  :class:`~lambdava.exceptions.InvalidNumericConversionError`.
* Instances pickle as ``(variant, SERIAL_VERSION, first, second)``.
"""

from __future__ import annotations

import numbers
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, final

from lambdava.core.protocols import Pair
from lambdava.exceptions import InvalidNumericConversionError, SerializationVersionError
from lambdava.logger import logger

A = TypeVar("A")
B = TypeVar("B")

SERIAL_VERSION: int = 1
"""Format-version tag carried by every pickled pair."""

INT_RANGE: tuple[int, int] = (-(2**31), 2**31 - 1)
LONG_RANGE: tuple[int, int] = (-(2**63), 2**63 - 1)


# ---------------------------------------------------------------------------
# Slot helpers
# ---------------------------------------------------------------------------

def _slots_equal(left: object, right: object) -> bool:
    """Absent equals absent, identical equals identical, else ``==``."""
    if left is right:
        return True
    if left is None or right is None:
        return False
    return bool(left == right)


def _slot_hash(value: object) -> int:
    """Hash of *value*, 0 when absent.  Unhashable values raise ``TypeError``."""
    return 0 if value is None else hash(value)


def _double_bits(value: float) -> int:
    """Return the IEEE-754 bit pattern of *value* as a signed int."""
    return struct.unpack("<q", struct.pack("<d", value))[0]


def _conversion_error(
    value: object, slot: str, target: str, *, hint: str | None = None
) -> InvalidNumericConversionError:
    logger.debug("Rejected %r for %s slot of %s", value, slot, target)
    return InvalidNumericConversionError(
        f"Cannot represent {slot} element {value!r} as {target}.",
        hint=hint,
    )


def _to_double(value: object, slot: str) -> float:
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise _conversion_error(value, slot, "a double")
    try:
        return float(value)
    except OverflowError as exc:
        raise _conversion_error(
            value, slot, "a double", hint="The value exceeds the double range."
        ) from exc


def _to_integer(value: object, slot: str, bounds: tuple[int, int], target: str) -> int:
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise _conversion_error(value, slot, target)
    result = int(value)
    low, high = bounds
    if not low <= result <= high:
        raise _conversion_error(
            value, slot, target, hint=f"Expected a value between {low} and {high}."
        )
    return result


def _restore_pair(cls: type[Any], version: int, first: object, second: object) -> Any:
    """Unpickling hook for every pair variant."""
    if version != cls.SERIAL_VERSION:
        raise SerializationVersionError(
            f"Unsupported {cls.__name__} format version {version}.",
            hint=f"Expected version {cls.SERIAL_VERSION}.",
        )
    return cls.of(first, second)


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------

class _PairMixin:
    """Rendering, unpacking and pickling shared by every variant.

    Variants provide ``first``/``second`` and the ``_equal_to`` /
    ``_hash_parts`` hooks.
    """

    __slots__ = ()

    SERIAL_VERSION: ClassVar[int] = SERIAL_VERSION

    first: Any
    second: Any

    @property
    def key(self) -> Any:
        """Alias for :attr:`first` when used as a key-value association."""
        return self.first

    @property
    def value(self) -> Any:
        """Alias for :attr:`second` when used as a key-value association."""
        return self.second

    def to_list(self) -> list[Any]:
        """Return a new ``[first, second]`` list on every call."""
        return [self.first, self.second]

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __len__(self) -> int:
        return 2

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Pair):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self._equal_to(other)

    def __hash__(self) -> int:
        left, right = self._hash_parts()
        return left ^ right

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore_pair, (type(self), self.SERIAL_VERSION, self.first, self.second))

    def _equal_to(self, other: Any) -> bool:
        raise NotImplementedError

    def _hash_parts(self) -> tuple[int, int]:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Generic variant
# ---------------------------------------------------------------------------

@final
@dataclass(frozen=True, slots=True, eq=False)
class ObjectsPair(_PairMixin, Generic[A, B]):
    """An immutable pair of arbitrary objects.

    No restriction is placed on the stored objects.  If mutable objects
    are stored, the pair itself effectively becomes mutable.

    ``hash()`` needs both elements to be hashable (or ``None``); a pair
    holding a list or dict still compares, renders and pickles, but
    raises ``TypeError`` when hashed, as a tuple would.
    """

    first: A
    """The first element, may be ``None``."""

    second: B
    """The second element, may be ``None``."""

    @classmethod
    def of(cls, first: A, second: B) -> ObjectsPair[A, B]:
        """Create a pair from two objects.  Never fails."""
        return cls(first, second)

    @classmethod
    def from_pair(cls, pair: Pair[A, B]) -> ObjectsPair[A, B]:
        """Copy any pair-family value into a generic pair."""
        return cls(pair.first, pair.second)

    def _equal_to(self, other: ObjectsPair[Any, Any]) -> bool:
        return _slots_equal(self.first, other.first) and _slots_equal(
            self.second, other.second
        )

    def _hash_parts(self) -> tuple[int, int]:
        return _slot_hash(self.first), _slot_hash(self.second)


# ---------------------------------------------------------------------------
# Numeric variants
# ---------------------------------------------------------------------------

@final
@dataclass(frozen=True, slots=True, eq=False)
class DoublesPair(_PairMixin):
    """An immutable pair of doubles."""

    first: float
    second: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", _to_double(self.first, "first"))
        object.__setattr__(self, "second", _to_double(self.second, "second"))

    @classmethod
    def of(cls, first: float, second: float) -> DoublesPair:
        """Create a pair of doubles.

        Raises
        ------
        InvalidNumericConversionError
            If either element is not a real number representable as a
            double.
        """
        return cls(first, second)

    @classmethod
    def from_pair(cls, pair: Pair[Any, Any]) -> DoublesPair:
        """Convert any pair-family value, failing on unrepresentable slots."""
        return cls(pair.first, pair.second)

    def _equal_to(self, other: DoublesPair) -> bool:
        return _double_bits(self.first) == _double_bits(other.first) and _double_bits(
            self.second
        ) == _double_bits(other.second)

    def _hash_parts(self) -> tuple[int, int]:
        return hash(_double_bits(self.first)), hash(_double_bits(self.second))


@final
@dataclass(frozen=True, slots=True, eq=False)
class IntDoublePair(_PairMixin):
    """An immutable pair of a 32-bit ``int`` and a double."""

    first: int
    second: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "first", _to_integer(self.first, "first", INT_RANGE, "an int")
        )
        object.__setattr__(self, "second", _to_double(self.second, "second"))

    @classmethod
    def of(cls, first: int, second: float) -> IntDoublePair:
        """Create an ``int`` to double pair.

        Raises
        ------
        InvalidNumericConversionError
            If *first* is not an integer in signed 32-bit range or
            *second* is not representable as a double.
        """
        return cls(first, second)

    @classmethod
    def from_pair(cls, pair: Pair[Any, Any]) -> IntDoublePair:
        """Convert any pair-family value, failing on unrepresentable slots."""
        return cls(pair.first, pair.second)

    def _equal_to(self, other: IntDoublePair) -> bool:
        return self.first == other.first and _double_bits(self.second) == _double_bits(
            other.second
        )

    def _hash_parts(self) -> tuple[int, int]:
        return hash(self.first), hash(_double_bits(self.second))


@final
@dataclass(frozen=True, slots=True, eq=False)
class LongDoublePair(_PairMixin):
    """An immutable pair of a 64-bit ``int`` and a double."""

    first: int
    second: float

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "first", _to_integer(self.first, "first", LONG_RANGE, "a long")
        )
        object.__setattr__(self, "second", _to_double(self.second, "second"))

    @classmethod
    def of(cls, first: int, second: float) -> LongDoublePair:
        """Create a ``long`` to double pair.

        Raises
        ------
        InvalidNumericConversionError
            If *first* is not an integer in signed 64-bit range or
            *second* is not representable as a double.
        """
        return cls(first, second)

    @classmethod
    def from_pair(cls, pair: Pair[Any, Any]) -> LongDoublePair:
        """Convert any pair-family value, failing on unrepresentable slots."""
        return cls(pair.first, pair.second)

    def _equal_to(self, other: LongDoublePair) -> bool:
        return self.first == other.first and _double_bits(self.second) == _double_bits(
            other.second
        )

    def _hash_parts(self) -> tuple[int, int]:
        return hash(self.first), hash(_double_bits(self.second))
