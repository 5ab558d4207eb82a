"""
Functional API: one function per operation, sequence first.

Every function accepts a ``Seq``/``Seq2``, a raw producer callable, or a
plain iterable (a mapping or iterable of pairs for the ``*2`` family).
Names ending in ``_`` would otherwise shadow a builtin.
"""

from typing import Any, Callable, Tuple, TypeVar

from lazyiterate.sequences import Seq, Seq2

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')


def all_(seq, predicate: Callable[[T], bool]) -> bool:
    return Seq.of(seq).all(predicate)


def all2(seq, predicate: Callable[[K, V], bool]) -> bool:
    return Seq2.of(seq).all(predicate)


def any_(seq, predicate: Callable[[T], bool]) -> bool:
    return Seq.of(seq).any(predicate)


def any2(seq, predicate: Callable[[K, V], bool]) -> bool:
    return Seq2.of(seq).any(predicate)


def count(seq) -> int:
    return Seq.of(seq).count()


def count2(seq) -> int:
    return Seq2.of(seq).count()


def find(seq, predicate: Callable[[T], bool], default: Any = None) -> T:
    """First matching element; raises NotFoundError carrying ``default``."""
    return Seq.of(seq).find(predicate, default)


def find2(seq, predicate: Callable[[K, V], bool],
          default_key: Any = None, default_value: Any = None) -> Tuple[K, V]:
    """First matching pair; raises NotFoundError carrying the default pair."""
    return Seq2.of(seq).find(predicate, default_key, default_value)


def reduce(seq, func: Callable[[A, T], A], initial: A) -> A:
    return Seq.of(seq).reduce(func, initial)


def reduce2(seq, func: Callable[[A, K, V], A], initial: A) -> A:
    return Seq2.of(seq).reduce(func, initial)


def filter_(seq, predicate: Callable[[T], bool]) -> Seq:
    return Seq.of(seq).filter(predicate)


def filter2(seq, predicate: Callable[[K, V], bool]) -> Seq2:
    return Seq2.of(seq).filter(predicate)


def map_(seq, func: Callable[[T], U]) -> Seq:
    return Seq.of(seq).map(func)


def map2(seq, func: Callable[[K, V], U]) -> Seq:
    return Seq2.of(seq).map(func)


def skip(seq, n: int) -> Seq:
    return Seq.of(seq).skip(n)


def skip2(seq, n: int) -> Seq2:
    return Seq2.of(seq).skip(n)


def take(seq, n: int) -> Seq:
    return Seq.of(seq).take(n)


def take2(seq, n: int) -> Seq2:
    return Seq2.of(seq).take(n)


def reverse(seq) -> Seq:
    return Seq.of(seq).reverse()


def reverse2(seq) -> Seq2:
    return Seq2.of(seq).reverse()


def zip_(first, second) -> Seq2:
    return Seq.of(first).zip(second)
