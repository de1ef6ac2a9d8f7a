"""Client connection layer for the embedded SQLite engine."""

from .config import Settings, load_settings, settings
from .database import Connection, ConnectionConfig, Savepoint
from .driver import (
    Driver,
    DriverPropertyInfo,
    DriverRegistry,
    connect,
    register,
    registry,
)
from .exceptions import (
    ConfigurationError,
    LiteConnError,
    ResourceError,
    StateError,
    UnsupportedOperationError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_test_logging,
)
from .types import (
    Capability,
    Concurrency,
    Environment,
    Holdability,
    IsolationLevel,
    ResultSetType,
    TransactionState,
)

__all__ = [
    "Capability",
    "Concurrency",
    "ConfigurationError",
    "Connection",
    "ConnectionConfig",
    "Driver",
    "DriverPropertyInfo",
    "DriverRegistry",
    "Environment",
    "Holdability",
    "IsolationLevel",
    "LiteConnError",
    "ResourceError",
    "ResultSetType",
    "Savepoint",
    "Settings",
    "StateError",
    "TransactionState",
    "UnsupportedOperationError",
    "connect",
    "get_logger",
    "load_settings",
    "register",
    "registry",
    "settings",
    "setup_logging",
    "setup_test_logging",
]
