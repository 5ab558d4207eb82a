"""
Sequence operators for transformation.

Operators wrap a producer and return a new producer without running it.
Units travel as positional arguments (``step(value)`` or
``step(key, value)``), so each operator serves both sequence shapes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from lazyiterate.sequences.buffer import ReverseBuffer
from lazyiterate.sequences.pull import Cursor

Producer = Callable[[Callable[..., bool]], None]


class SequenceOperator(ABC):
    """Base class for sequence operators."""

    @abstractmethod
    def apply(self, produce: Producer) -> Producer:
        """Wrap ``produce`` in a new, not yet started producer."""
        pass


class FilterOperator(SequenceOperator):
    """Forward only units matching a predicate."""

    def __init__(self, predicate: Callable[..., bool]):
        self.predicate = predicate

    def apply(self, produce: Producer) -> Producer:
        predicate = self.predicate

        def filtered(step):
            def forward(*unit):
                if predicate(*unit):
                    return step(*unit)
                return True
            produce(forward)

        return filtered


class MapOperator(SequenceOperator):
    """Map each unit to a single new value."""

    def __init__(self, func: Callable[..., Any]):
        self.func = func

    def apply(self, produce: Producer) -> Producer:
        func = self.func

        def mapped(step):
            produce(lambda *unit: step(func(*unit)))

        return mapped


class SkipOperator(SequenceOperator):
    """Drop the first n units."""

    def __init__(self, n: int):
        self.n = max(0, n)

    def apply(self, produce: Producer) -> Producer:
        n = self.n
        if n == 0:
            return produce

        def skipped(step):
            seen = 0

            def forward(*unit):
                nonlocal seen
                if seen >= n:
                    return step(*unit)
                seen += 1
                return True
            produce(forward)

        return skipped


class TakeOperator(SequenceOperator):
    """Forward at most the first n units."""

    def __init__(self, n: int):
        self.n = max(0, n)

    def apply(self, produce: Producer) -> Producer:
        n = self.n

        def taken(step):
            if n == 0:
                return
            remaining = n

            def forward(*unit):
                nonlocal remaining
                remaining -= 1
                # Stop right after the n-th unit; never ask for one more
                return step(*unit) and remaining > 0
            produce(forward)

        return taken


class ReverseOperator(SequenceOperator):
    """
    Produce units back-to-front.

    The whole source is buffered before the first unit goes out, so the
    source must be finite.
    """

    def apply(self, produce: Producer) -> Producer:
        def reversed_(step):
            buffer = ReverseBuffer()
            produce(lambda *unit: buffer.push(unit))
            for unit in buffer.drain():
                if not step(*unit):
                    break

        return reversed_


class ZipOperator(SequenceOperator):
    """
    Pair units of two producers in lockstep.

    Stops as soon as either side runs out; the rest of the longer side is
    never produced.
    """

    def __init__(self, other: Producer):
        self.other = other

    def apply(self, produce: Producer) -> Producer:
        other = self.other

        def zipped(step):
            with Cursor(produce) as left, Cursor(other) as right:
                while True:
                    first = left.next_unit()
                    if first is None:
                        break
                    second = right.next_unit()
                    if second is None:
                        break
                    if not step(*first, *second):
                        break

        return zipped
