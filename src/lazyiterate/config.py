"""
Configuration management for lazy sequence operations.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

import psutil

# Names of lazyiterate.memory.MemoryPressureLevel members
_PRESSURE_LEVELS = ("NONE", "LOW", "MEDIUM", "HIGH", "CRITICAL")


@dataclass
class LazyIterateConfig:
    """Global configuration for lazy sequence operations."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))

    # Buffering (reverse)
    memory_check_interval: int = 10_000  # Pushes between pressure checks
    buffer_warning_level: str = "MEDIUM"

    # Pull cursors (zip, iteration)
    pull_join_timeout: float = 5.0  # seconds
    thread_name_prefix: str = "lazyiterate-pull"

    _instance: ClassVar[Optional['LazyIterateConfig']] = None

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Reject settings the sequence operations cannot run with."""
        if self.memory_check_interval < 1:
            raise ValueError("memory_check_interval must be at least 1")
        if self.pull_join_timeout <= 0:
            raise ValueError("pull_join_timeout must be positive")
        if self.buffer_warning_level.upper() not in _PRESSURE_LEVELS:
            raise ValueError(f"Unknown memory pressure level: {self.buffer_warning_level!r}")

    @classmethod
    def get_instance(cls) -> 'LazyIterateConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """
        Set default configuration values.

        Raises:
            ValueError: if the resulting settings are invalid; nothing is changed.
        """
        instance = cls.get_instance()
        previous = {}
        for key, value in kwargs.items():
            if hasattr(instance, key):
                previous[key] = getattr(instance, key)
                setattr(instance, key, value)
        try:
            instance._validate()
        except ValueError:
            for key, value in previous.items():
                setattr(instance, key, value)
            raise


# Global configuration instance
config = LazyIterateConfig.get_instance()
