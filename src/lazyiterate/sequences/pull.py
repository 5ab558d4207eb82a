"""
Pull cursors over push producers.

A producer drives its step callback; a cursor turns that around so the
caller asks for one unit at a time. The producer runs on a helper thread
and hands units over through single-slot queues in strict lockstep: it is
parked inside ``step`` until the consumer asks for the next unit or tells
it to stop, so at most one unit is ever in flight.
"""

import contextvars
import itertools
import logging
import queue
import threading
from typing import Any, Callable, Iterator, Optional, Tuple

from lazyiterate.config import config

logger = logging.getLogger(__name__)

Producer = Callable[..., None]
Unit = Tuple

_ITEM = "item"
_DONE = "done"
_ERROR = "error"

_cursor_ids = itertools.count(1)


class Cursor(Iterator[Any]):
    """
    Step-by-step view of a producer.

    The helper thread is only started by the first advance, so a cursor
    that is never advanced holds no resources. Use it as a context manager
    (or call ``close``) to release the producer on every exit path.
    """

    def __init__(self, produce: Producer):
        self._produce = produce
        self._outbox: queue.Queue = queue.Queue(maxsize=1)  # producer -> consumer
        self._inbox: queue.Queue = queue.Queue(maxsize=1)   # consumer -> producer
        self._thread: Optional[threading.Thread] = None
        self._halted = False    # producer side: stop was delivered
        self._finished = False  # consumer side: nothing more to pull

    def __enter__(self) -> 'Cursor':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # Never let a stop-time producer error replace one already propagating
        self._close(reraise=exc_type is None)

    def __iter__(self) -> 'Cursor':
        return self

    def __next__(self) -> Any:
        unit = self.next_unit()
        if unit is None:
            raise StopIteration
        return unit[0] if len(unit) == 1 else unit

    @property
    def finished(self) -> bool:
        return self._finished

    def next_unit(self) -> Optional[Unit]:
        """Advance the producer; return the next unit, or None once exhausted."""
        if self._finished:
            return None

        if self._thread is None:
            self._start()
        else:
            self._inbox.put(True)

        kind, payload = self._outbox.get()
        if kind == _ITEM:
            return payload

        self._finish()
        if kind == _ERROR:
            raise payload
        return None

    def close(self) -> None:
        """Stop the producer if it is suspended and wait for its thread."""
        self._close(reraise=True)

    def _close(self, reraise: bool) -> None:
        if self._finished:
            return
        self._finished = True
        if self._thread is None:
            return

        # The producer is parked inside step waiting for a verdict
        self._inbox.put(False)
        try:
            kind, payload = self._outbox.get(timeout=config.pull_join_timeout)
        except queue.Empty:
            logger.warning(f"{self._thread.name}: producer kept running after stop, abandoning it")
            return

        self._thread.join(timeout=config.pull_join_timeout)
        logger.debug(f"{self._thread.name}: stopped early")
        if kind == _ERROR:
            if not reraise:
                logger.debug(f"{self._thread.name}: producer failed while stopping: {payload!r}")
                return
            raise payload

    def _start(self) -> None:
        name = f"{config.thread_name_prefix}-{next(_cursor_ids)}"
        # User callables upstream must see the caller's context variables
        context = contextvars.copy_context()
        self._thread = threading.Thread(target=context.run, args=(self._run,), name=name, daemon=True)
        logger.debug(f"{name}: starting producer")
        self._thread.start()

    def _finish(self) -> None:
        self._finished = True
        self._thread.join(timeout=config.pull_join_timeout)
        logger.debug(f"{self._thread.name}: producer exhausted")

    def _run(self) -> None:
        try:
            self._produce(self._step)
        except BaseException as exc:
            self._outbox.put((_ERROR, exc))
        else:
            self._outbox.put((_DONE, None))

    def _step(self, *unit) -> bool:
        if self._halted:
            # Producer ignored an earlier stop
            return False
        self._outbox.put((_ITEM, unit))
        if self._inbox.get():
            return True
        self._halted = True
        return False


def pull(produce: Producer) -> Cursor:
    """Open a pull cursor over ``produce``."""
    return Cursor(produce)
