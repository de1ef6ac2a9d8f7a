"""Exceptions raised by liteconn."""

from pathlib import Path

from .types import Capability


class LiteConnError(Exception):
    """Base exception for connection layer errors."""

    pass


class ConfigurationError(LiteConnError):
    """Raised when a connection target cannot be used."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class StateError(LiteConnError):
    """Raised when an operation is invalid for the current connection state."""

    pass


class UnsupportedOperationError(LiteConnError):
    """Raised when the engine does not support a requested operation."""

    def __init__(
        self,
        message: str,
        dimension: str | None = None,
        capability: Capability | None = None,
    ) -> None:
        super().__init__(message)
        self.dimension = dimension
        self.capability = capability


class ResourceError(LiteConnError):
    """Raised when the engine fails to open, execute or acquire a lock."""

    pass
