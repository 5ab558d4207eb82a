"""
Stack buffer for operations that must see the whole source first.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from lazyiterate.config import config
from lazyiterate.memory import MemoryMonitor, MemoryPressureLevel, monitor

logger = logging.getLogger(__name__)

Unit = Tuple


class ReverseBuffer:
    """
    Ordered buffer of produced units, drained back-to-front.

    Every ``config.memory_check_interval`` pushes the memory monitor is
    sampled so pressure caused by buffering a large source gets reported.
    """

    def __init__(self, memory_monitor: Optional[MemoryMonitor] = None):
        self._stack: List[Unit] = []
        self._monitor = memory_monitor or monitor
        self._warn_level = MemoryPressureLevel.from_name(config.buffer_warning_level)
        self.peak_pressure = MemoryPressureLevel.NONE

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, unit: Unit) -> bool:
        """Append a unit; returns True so it can serve as a step callback."""
        self._stack.append(unit)
        if len(self._stack) % config.memory_check_interval == 0:
            self._check_pressure()
        return True

    def _check_pressure(self) -> None:
        level = self._monitor.check_memory_pressure(min_level=self._warn_level)
        if level > self.peak_pressure:
            self.peak_pressure = level
        logger.debug(f"Reverse buffer holds {len(self._stack)} units, pressure {level.name}")

    def drain(self) -> Iterator[Unit]:
        """Pop units last-in first-out until empty."""
        stack = self._stack
        while stack:
            yield stack.pop()
