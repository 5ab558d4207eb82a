"""Memory monitoring and pressure detection."""

import time
import logging
import psutil
from enum import Enum
from typing import List, Optional
from dataclasses import dataclass
from abc import ABC, abstractmethod

from lazyiterate.config import config

logger = logging.getLogger(__name__)


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value

    @classmethod
    def from_name(cls, name: str) -> 'MemoryPressureLevel':
        """Look up a level by (case-insensitive) name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown memory pressure level: {name!r}") from None


@dataclass
class MemoryInfo:
    """Memory usage information."""
    total: int
    available: int
    used: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    @property
    def used_gb(self) -> float:
        return self.used / (1024 ** 3)

    @property
    def available_gb(self) -> float:
        return self.available / (1024 ** 3)

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% used "
                f"({self.used_gb:.2f}/{self.available_gb:.2f} GB), "
                f"Pressure: {self.pressure_level.name}")


class MemoryPressureHandler(ABC):
    """Abstract base class for memory pressure handlers."""

    @abstractmethod
    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        """Check if this handler should handle the given pressure level."""
        pass

    @abstractmethod
    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        """Handle memory pressure."""
        pass


class MemoryMonitor:
    """Sample system memory and detect pressure on demand."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None for configured limit)
        """
        self._memory_limit = memory_limit
        self.handlers: List[MemoryPressureHandler] = []
        self._last_level = MemoryPressureLevel.NONE

    @property
    def memory_limit(self) -> int:
        return self._memory_limit or config.memory_limit

    @property
    def last_level(self) -> MemoryPressureLevel:
        """Pressure level seen by the most recent check."""
        return self._last_level

    def add_handler(self, handler: MemoryPressureHandler) -> None:
        """Add a memory pressure handler."""
        self.handlers.append(handler)

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        mem = psutil.virtual_memory()

        # Use configured limit if lower than system memory
        total = min(mem.total, self.memory_limit)
        used = mem.used
        available = max(0, total - used)
        percent = (used / total) * 100 if total else 100.0

        if percent >= 95:
            level = MemoryPressureLevel.CRITICAL
        elif percent >= 85:
            level = MemoryPressureLevel.HIGH
        elif percent >= 70:
            level = MemoryPressureLevel.MEDIUM
        elif percent >= 50:
            level = MemoryPressureLevel.LOW
        else:
            level = MemoryPressureLevel.NONE

        return MemoryInfo(
            total=total,
            available=available,
            used=used,
            percent=percent,
            pressure_level=level,
            timestamp=time.time()
        )

    def check_memory_pressure(self,
                              min_level: MemoryPressureLevel = MemoryPressureLevel.NONE
                              ) -> MemoryPressureLevel:
        """
        Check current memory pressure and notify handlers.

        Handlers are only notified when the level is at least ``min_level``.
        """
        info = self.get_memory_info()
        self._last_level = info.pressure_level

        if info.pressure_level >= min_level:
            for handler in self.handlers:
                if handler.can_handle(info.pressure_level, info):
                    try:
                        handler.handle(info.pressure_level, info)
                    except Exception:
                        # A broken handler must not break the sequence being buffered
                        logger.exception(f"Memory pressure handler {handler!r} failed")

        return info.pressure_level
