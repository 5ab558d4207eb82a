"""
Terminal operations: drive a producer and return a plain value.
"""

from typing import Any, Callable, Tuple, TypeVar

from lazyiterate.errors import NotFoundError

A = TypeVar('A')

Producer = Callable[[Callable[..., bool]], None]

_MISSING = object()


def all_units(produce: Producer, predicate: Callable[..., bool]) -> bool:
    """True unless some unit fails ``predicate``; stops at the first failure."""
    result = True

    def step(*unit):
        nonlocal result
        if predicate(*unit):
            return True
        result = False
        return False

    produce(step)
    return result


def any_units(produce: Producer, predicate: Callable[..., bool]) -> bool:
    """True as soon as a unit matches ``predicate``."""
    result = False

    def step(*unit):
        nonlocal result
        if predicate(*unit):
            result = True
            return False
        return True

    produce(step)
    return result


def count_units(produce: Producer) -> int:
    count = 0

    def step(*unit):
        nonlocal count
        count += 1
        return True

    produce(step)
    return count


def find_unit(produce: Producer, predicate: Callable[..., bool], zero: Any = None) -> Tuple:
    """
    Return the first unit matching ``predicate``.

    Raises:
        NotFoundError: if the source runs out first; ``zero`` rides along.
    """
    found: Any = _MISSING

    def step(*unit):
        nonlocal found
        if predicate(*unit):
            found = unit
            return False
        return True

    produce(step)
    if found is _MISSING:
        raise NotFoundError(zero)
    return found


def reduce_units(produce: Producer, func: Callable[..., A], initial: A) -> A:
    """Left fold in production order: ``acc = func(acc, *unit)``."""
    acc = initial

    def step(*unit):
        nonlocal acc
        acc = func(acc, *unit)
        return True

    produce(step)
    return acc
