"""
Configuration for stream rendering and diagnostics.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass
class StreamConfig:
    """Global settings shared by every stream."""

    # Number of elements shown by show() and Seq.__repr__ when no count is given
    preview_length: int = 10

    # Forcing chains deeper than this are reported at DEBUG level
    deep_force_threshold: int = 1000

    _instance: ClassVar[Optional['StreamConfig']] = None

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set configuration values on the shared instance."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if key.startswith('_') or not hasattr(instance, key):
                raise AttributeError("unknown stream setting '{}'".format(key))
            setattr(instance, key, value)


# Global configuration instance
config = StreamConfig.get_instance()
