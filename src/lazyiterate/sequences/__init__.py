"""Lazy sequences driven by step callbacks."""

from lazyiterate.sequences.sequence import Seq, Seq2
from lazyiterate.sequences.operators import (
    SequenceOperator,
    FilterOperator,
    MapOperator,
    SkipOperator,
    TakeOperator,
    ReverseOperator,
    ZipOperator,
)
from lazyiterate.sequences.pull import Cursor, pull
from lazyiterate.sequences.buffer import ReverseBuffer

__all__ = [
    "Seq",
    "Seq2",
    "SequenceOperator",
    "FilterOperator",
    "MapOperator",
    "SkipOperator",
    "TakeOperator",
    "ReverseOperator",
    "ZipOperator",
    "Cursor",
    "pull",
    "ReverseBuffer",
]
