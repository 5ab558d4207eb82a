"""
lazyiterate: lazy sequence combinators over step-callback producers.

A sequence is any callable ``produce(step)`` that calls ``step`` once per
element and stops as soon as ``step`` returns False. The combinators here
consume and return such producers without materializing intermediate
collections.
"""

from lazyiterate.config import LazyIterateConfig
from lazyiterate.errors import LazyIterateError, NotFoundError
from lazyiterate.sequences import Seq, Seq2, Cursor, pull
from lazyiterate.memory import MemoryMonitor, MemoryPressureLevel
from lazyiterate.functions import (
    all_, all2, any_, any2, count, count2, find, find2,
    reduce, reduce2, filter_, filter2, map_, map2,
    skip, skip2, take, take2, reverse, reverse2, zip_,
)

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "LazyIterateConfig",
    "LazyIterateError",
    "NotFoundError",
    "Seq",
    "Seq2",
    "Cursor",
    "pull",
    "MemoryMonitor",
    "MemoryPressureLevel",
    "all_", "all2",
    "any_", "any2",
    "count", "count2",
    "find", "find2",
    "reduce", "reduce2",
    "filter_", "filter2",
    "map_", "map2",
    "skip", "skip2",
    "take", "take2",
    "reverse", "reverse2",
    "zip_",
]
