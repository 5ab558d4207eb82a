"""Exceptions raised by lazyiterate."""

from typing import Any


class LazyIterateError(Exception):
    """Base class for lazyiterate errors."""


class NotFoundError(LazyIterateError, LookupError):
    """
    No element of a sequence satisfied the search predicate.

    The zero value the caller asked for travels with the error in
    ``zero``: the ``default`` passed to ``find``, or the
    ``(default_key, default_value)`` pair passed to ``find2``.
    """

    def __init__(self, zero: Any = None, message: str = "no element found"):
        super().__init__(message)
        self.zero = zero
