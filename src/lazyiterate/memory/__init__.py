"""Memory monitoring for buffering sequence operations."""

from lazyiterate.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    MemoryPressureHandler,
)
from lazyiterate.memory.handlers import LoggingHandler

# Global monitor instance
monitor = MemoryMonitor()
monitor.add_handler(LoggingHandler())

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "MemoryPressureHandler",
    "LoggingHandler",
    "monitor",
]
