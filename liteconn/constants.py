"""Driver constants."""

from typing import Final

from .types import Concurrency, Holdability, IsolationLevel, ResultSetType

URL_PREFIX: Final[str] = "sqlite:"

MEMORY_TARGET: Final[str] = ":memory:"

DEFAULT_BUSY_TIMEOUT_MS: Final[int] = 3000

DRIVER_NAME: Final[str] = "liteconn"
DRIVER_MAJOR_VERSION: Final[int] = 1
DRIVER_MINOR_VERSION: Final[int] = 1

SAVEPOINT_PREFIX: Final[str] = "sp_"

SUPPORTED_ISOLATION_LEVELS: Final[tuple[IsolationLevel, ...]] = (
    IsolationLevel.SERIALIZABLE,
    IsolationLevel.READ_UNCOMMITTED,
)

# The only (result type, concurrency, holdability) combination the engine offers
SUPPORTED_RESULT_SET_TYPE: Final[ResultSetType] = ResultSetType.FORWARD_ONLY
SUPPORTED_CONCURRENCY: Final[Concurrency] = Concurrency.READ_ONLY
SUPPORTED_HOLDABILITY: Final[Holdability] = Holdability.CLOSE_CURSORS_AT_COMMIT

# Julian day number of the Unix epoch (1970-01-01T00:00:00Z)
UNIX_EPOCH_JULIAN_DAY: Final[float] = 2440587.5
MILLIS_PER_DAY: Final[int] = 86_400_000
