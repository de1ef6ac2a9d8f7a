"""Engine handle interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from liteconn.types import StatementParamType


class EngineHandle(ABC):
    """Abstract handle on a native embedded SQL engine.

    A handle is owned by exactly one connection. It is not safe to share
    across threads without external serialization.
    """

    def __init__(self) -> None:
        self._julian_day_mode = False

    @abstractmethod
    def open(self, path: str, shared_cache: bool = False) -> None:
        """Open the database at ``path``.

        Args:
            path: Resolved filesystem path or the in-memory sentinel
            shared_cache: Whether to share the page cache between handles

        Raises:
            ResourceError: If the engine cannot open the database
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the database. Closing a closed handle does nothing."""
        pass

    @abstractmethod
    def execute(self, command: str) -> None:
        """Execute a raw command with no parameters and no result.

        Raises:
            ResourceError: With the engine's message
        """
        pass

    @abstractmethod
    def query(self, sql: str, params: StatementParamType = None) -> Any:
        """Execute a statement and return the engine cursor."""
        pass

    @abstractmethod
    def executescript(self, script: str) -> Any:
        """Execute several statements in one call."""
        pass

    @abstractmethod
    def set_busy_timeout(self, ms: int) -> None:
        """Set how long a blocked call waits for a lock."""
        pass

    @abstractmethod
    def libversion(self) -> str:
        """Return the native library version."""
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Check if the handle holds an open database."""
        pass

    @property
    def julian_day_mode(self) -> bool:
        """Whether dates are stored as julian day numbers."""
        return self._julian_day_mode

    def set_julian_day_mode(self, enabled: bool) -> None:
        """Select the temporal encoding for date and time values."""
        self._julian_day_mode = enabled

    @abstractmethod
    def encode_datetime(self, value: date) -> int | float:
        """Encode a date or datetime using the current temporal encoding."""
        pass
