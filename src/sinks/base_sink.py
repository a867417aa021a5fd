"""
Base Sink - Abstract destination for formatted log messages.

A LogWriter composes two sinks: a console mirror and the CSV file. Each sink
receives the already-formatted message and owns its own failure behaviour.
"""

from abc import ABC, abstractmethod


class BaseSink(ABC):
    """Abstract base class for all sink implementations.

    Subclasses must implement:
        - write(level, message): deliver one message at the given level
        - close(): release any resources held by the sink
    """

    @abstractmethod
    def write(self, level: str, message: str) -> None:
        """Deliver one formatted message."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass
