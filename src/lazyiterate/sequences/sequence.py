"""
Lazy sequences: single values (``Seq``) and key/value pairs (``Seq2``).
"""

from collections.abc import Mapping
from typing import (
    Any, Callable, Generic, Iterable, List, Tuple, TypeVar, Union
)

from lazyiterate.sequences.operators import (
    FilterOperator, MapOperator, SkipOperator, TakeOperator,
    ReverseOperator, ZipOperator
)
from lazyiterate.sequences.pull import Cursor
from lazyiterate.sequences.reductions import (
    all_units, any_units, count_units, find_unit, reduce_units
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')

Producer = Callable[[Callable[..., bool]], None]


class _BaseSeq:
    """Shared plumbing: hold a producer and be one."""

    __slots__ = ('_produce',)

    def __init__(self, produce: Producer):
        if not callable(produce):
            raise TypeError("Source must be a producer callable")
        self._produce = produce

    def __call__(self, step: Callable[..., bool]) -> None:
        """Drive the sequence: call ``step`` per unit until exhausted or it returns False."""
        self._produce(step)

    def __iter__(self):
        # Generator finalization closes the cursor when the caller abandons us
        with Cursor(self._produce) as cursor:
            yield from cursor

    def count(self) -> int:
        """Count units. Always consumes the whole source."""
        return count_units(self._produce)


class Seq(_BaseSeq, Iterable[T]):
    """
    A lazy, replayable sequence of single values.

    Nothing runs until the sequence is driven, either by calling it with a
    step callback, by iterating it, or by a terminal operation.
    """

    __slots__ = ()

    @classmethod
    def of(cls, source: Union['Seq[T]', Producer, Iterable[T]]) -> 'Seq[T]':
        """Coerce a producer callable or an iterable into a ``Seq``."""
        if isinstance(source, Seq):
            return source
        if isinstance(source, Seq2):
            raise TypeError("Expected a single-value sequence, got a paired one")
        if callable(source):
            return cls(source)
        if hasattr(source, '__iter__'):
            return cls.from_iterable(source)
        raise TypeError("Source must be a producer callable or an iterable")

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Seq[T]':
        """
        Create a sequence over ``iterable``.

        Replayable when ``iterable`` is (lists, ranges, ...); a one-shot
        iterator yields its values only once.
        """
        def produce(step):
            for item in iterable:
                if not step(item):
                    return
        return cls(produce)

    @classmethod
    def range(cls, *args) -> 'Seq[int]':
        """Create a sequence of integers."""
        return cls.from_iterable(range(*args))

    # Terminal operators

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True iff every element satisfies ``predicate`` (True when empty)."""
        return all_units(self._produce, predicate)

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """True iff some element satisfies ``predicate`` (False when empty)."""
        return any_units(self._produce, predicate)

    def find(self, predicate: Callable[[T], bool], default: Any = None) -> T:
        """
        Return the first element satisfying ``predicate``.

        Raises:
            NotFoundError: no element matched; ``error.zero`` is ``default``.
        """
        return find_unit(self._produce, predicate, zero=default)[0]

    def reduce(self, func: Callable[[A, T], A], initial: A) -> A:
        """Fold left to right, starting from ``initial``."""
        return reduce_units(self._produce, func, initial)

    def collect(self) -> List[T]:
        """Collect all elements into a list."""
        items: List[T] = []
        self._produce(lambda item: items.append(item) or True)
        return items

    # Transformation operators

    def filter(self, predicate: Callable[[T], bool]) -> 'Seq[T]':
        """Keep only elements matching predicate."""
        return Seq(FilterOperator(predicate).apply(self._produce))

    def map(self, func: Callable[[T], U]) -> 'Seq[U]':
        """Apply function to each element."""
        return Seq(MapOperator(func).apply(self._produce))

    def skip(self, n: int) -> 'Seq[T]':
        """Skip first n elements (negative n skips nothing)."""
        return Seq(SkipOperator(n).apply(self._produce))

    def take(self, n: int) -> 'Seq[T]':
        """Take first n elements (negative n takes nothing)."""
        return Seq(TakeOperator(n).apply(self._produce))

    def reverse(self) -> 'Seq[T]':
        """Elements back-to-front. Buffers the whole (finite) source."""
        return Seq(ReverseOperator().apply(self._produce))

    def zip(self, other: Union['Seq[U]', Producer, Iterable[U]]) -> 'Seq2[T, U]':
        """Pair elements with those of ``other``; stops with the shorter one."""
        return Seq2(ZipOperator(Seq.of(other)).apply(self._produce))


class Seq2(_BaseSeq, Generic[K, V]):
    """
    A lazy, replayable sequence of key/value pairs.

    Keys need not be unique; order is whatever the source produces.
    Iterating a ``Seq2`` yields ``(key, value)`` tuples.
    """

    __slots__ = ()

    @classmethod
    def of(cls, source: Union['Seq2[K, V]', Producer, Iterable[Tuple[K, V]]]) -> 'Seq2[K, V]':
        """Coerce a producer callable, a mapping or an iterable of pairs into a ``Seq2``."""
        if isinstance(source, Seq2):
            return source
        if isinstance(source, Seq):
            raise TypeError("Expected a paired sequence, got a single-value one")
        if callable(source):
            return cls(source)
        if isinstance(source, Mapping):
            return cls.from_mapping(source)
        if hasattr(source, '__iter__'):
            return cls.from_pairs(source)
        raise TypeError("Source must be a producer callable or an iterable of pairs")

    # Factory methods

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[K, V]]) -> 'Seq2[K, V]':
        """Create a paired sequence from an iterable of 2-tuples."""
        def produce(step):
            for key, value in pairs:
                if not step(key, value):
                    return
        return cls(produce)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> 'Seq2[K, V]':
        """Create a paired sequence over ``mapping.items()`` in iteration order."""
        def produce(step):
            for key, value in mapping.items():
                if not step(key, value):
                    return
        return cls(produce)

    @classmethod
    def enumerate(cls, source: Union[Seq[V], Producer, Iterable[V]], start: int = 0) -> 'Seq2[int, V]':
        """Pair each element of ``source`` with its position."""
        inner = Seq.of(source)

        def produce(step):
            index = start

            def forward(value):
                nonlocal index
                current = index
                index += 1
                return step(current, value)
            inner(forward)
        return cls(produce)

    # Terminal operators

    def all(self, predicate: Callable[[K, V], bool]) -> bool:
        """True iff every pair satisfies ``predicate(key, value)``."""
        return all_units(self._produce, predicate)

    def any(self, predicate: Callable[[K, V], bool]) -> bool:
        """True iff some pair satisfies ``predicate(key, value)``."""
        return any_units(self._produce, predicate)

    def find(self, predicate: Callable[[K, V], bool],
             default_key: Any = None, default_value: Any = None) -> Tuple[K, V]:
        """
        Return the first ``(key, value)`` satisfying ``predicate``.

        Raises:
            NotFoundError: no pair matched; ``error.zero`` is
                ``(default_key, default_value)``.
        """
        return find_unit(self._produce, predicate, zero=(default_key, default_value))

    def reduce(self, func: Callable[[A, K, V], A], initial: A) -> A:
        """Fold left to right: ``acc = func(acc, key, value)``."""
        return reduce_units(self._produce, func, initial)

    def collect(self) -> List[Tuple[K, V]]:
        """Collect all pairs into a list of tuples."""
        pairs: List[Tuple[K, V]] = []
        self._produce(lambda key, value: pairs.append((key, value)) or True)
        return pairs

    # Transformation operators

    def filter(self, predicate: Callable[[K, V], bool]) -> 'Seq2[K, V]':
        """Keep only pairs matching ``predicate(key, value)``."""
        return Seq2(FilterOperator(predicate).apply(self._produce))

    def map(self, func: Callable[[K, V], U]) -> Seq[U]:
        """Flatten each pair to ``func(key, value)``; the result is single-valued."""
        return Seq(MapOperator(func).apply(self._produce))

    def skip(self, n: int) -> 'Seq2[K, V]':
        """Skip first n pairs (negative n skips nothing)."""
        return Seq2(SkipOperator(n).apply(self._produce))

    def take(self, n: int) -> 'Seq2[K, V]':
        """Take first n pairs (negative n takes nothing)."""
        return Seq2(TakeOperator(n).apply(self._produce))

    def reverse(self) -> 'Seq2[K, V]':
        """Pairs back-to-front, kept intact. Buffers the whole (finite) source."""
        return Seq2(ReverseOperator().apply(self._produce))
