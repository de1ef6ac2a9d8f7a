"""Connection lifecycle and transaction state."""

from collections.abc import Callable
from types import TracebackType

from pydantic import BaseModel, Field

from liteconn.constants import DEFAULT_BUSY_TIMEOUT_MS, SUPPORTED_HOLDABILITY
from liteconn.database.capabilities import UnsupportedCapabilities
from liteconn.database.cursor import check_cursor, check_holdability
from liteconn.database.implementations.sqlite import SQLiteEngine
from liteconn.database.interfaces import EngineHandle
from liteconn.database.metadata import MetaData
from liteconn.database.path_resolver import resolve_target
from liteconn.database.savepoint import Savepoint, SavepointSequencer
from liteconn.database.statement import PreparedStatement, Statement
from liteconn.exceptions import (
    LiteConnError,
    ResourceError,
    StateError,
    UnsupportedOperationError,
)
from liteconn.log import get_logger
from liteconn.types import (
    Concurrency,
    Holdability,
    IsolationLevel,
    ResultSetType,
    TransactionState,
)

logger = get_logger(__name__)

BEGIN = "begin;"
COMMIT = "commit;"
ROLLBACK = "rollback;"

EngineFactory = Callable[[], EngineHandle]


class ConnectionConfig(BaseModel):
    """Everything needed to open a connection."""

    url: str = Field(description="Opaque identifier the connection was opened with")
    target: str = Field(description="Filesystem path or ':memory:'")
    shared_cache: bool = Field(default=False, description="Shared-cache mode")
    julian_day: bool = Field(
        default=False, description="Store dates and times as julian day numbers"
    )
    busy_timeout_ms: int = Field(
        default=DEFAULT_BUSY_TIMEOUT_MS,
        ge=0,
        description="Milliseconds a blocked write waits for a lock",
    )


class Connection:
    """One logical session bound to exactly one engine handle.

    Auto-commit mode lets the engine wrap each statement in its own
    transaction. Leaving it sends ``begin;``, and while out of it the
    connection is always inside an open transaction: ``commit()`` and
    ``rollback()`` immediately begin the next one.

    A connection is not thread-safe. Callers serialize access themselves.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        engine_factory: EngineFactory = SQLiteEngine,
    ) -> None:
        """Open a connection.

        Args:
            config: Connection configuration
            engine_factory: Creates the engine handle to open

        Raises:
            ConfigurationError: If the target path cannot be used
            ResourceError: If the engine fails to open or configure
        """
        target = resolve_target(config.target)

        self._url = config.url
        self._read_only = target.read_only
        self._shared_cache = config.shared_cache
        self._auto_commit = True
        self._isolation_level = IsolationLevel.SERIALIZABLE
        self._busy_timeout = config.busy_timeout_ms
        self._savepoints = SavepointSequencer()
        self._metadata: MetaData | None = None
        self._extensions = UnsupportedCapabilities()
        self._engine: EngineHandle | None = None

        engine = engine_factory()
        engine.open(target.path, shared_cache=config.shared_cache)
        try:
            engine.set_busy_timeout(self._busy_timeout)
            engine.set_julian_day_mode(config.julian_day)
        except LiteConnError:
            engine.close()
            raise

        self._engine = engine
        logger.info(f"Opened connection: {self._url} (read_only={self._read_only})")

    # Lifecycle

    def close(self) -> None:
        """Close the connection. Closing a closed connection does nothing."""
        if self._engine is None:
            return
        if self._metadata is not None:
            self._metadata.close()
            self._metadata = None

        engine, self._engine = self._engine, None
        engine.close()
        logger.info(f"Closed connection: {self._url}")

    @property
    def is_closed(self) -> bool:
        return self._engine is None

    def is_valid(self, timeout: int = 0) -> bool:
        """Check that the connection is open and the engine answers.

        Args:
            timeout: Seconds to wait; 0 means no limit. Kept for API
                compatibility, the busy timeout bounds the check.
        """
        if timeout < 0:
            raise ValueError(f"timeout must not be negative: {timeout}")
        if self._engine is None:
            return False
        try:
            self._engine.query("select 1;").close()
        except ResourceError as e:
            logger.warning(f"Connection {self._url} failed validation: {e}")
            return False
        return True

    @property
    def engine(self) -> EngineHandle:
        """The live engine handle."""
        return self._check_open()

    @property
    def url(self) -> str:
        self._check_open()
        return self._url

    @property
    def read_only(self) -> bool:
        self._check_open()
        return self._read_only

    def set_read_only(self, read_only: bool) -> None:
        """Accepted for API compatibility; read-only is fixed at open."""
        self._check_open()
        if read_only != self._read_only:
            logger.debug(f"Ignoring read_only={read_only} on {self._url}")

    @property
    def shared_cache(self) -> bool:
        self._check_open()
        return self._shared_cache

    @property
    def julian_day(self) -> bool:
        return self._check_open().julian_day_mode

    @property
    def busy_timeout(self) -> int:
        self._check_open()
        return self._busy_timeout

    def set_timeout(self, ms: int) -> None:
        """Change how long a blocked write waits for a lock."""
        engine = self._check_open()
        self._busy_timeout = ms
        engine.set_busy_timeout(ms)

    def libversion(self) -> str:
        return self._check_open().libversion()

    def driver_version(self) -> str:
        return "native" if self._engine is not None else "unloaded"

    @property
    def metadata(self) -> MetaData:
        self._check_open()
        if self._metadata is None:
            self._metadata = MetaData(self)
        return self._metadata

    @property
    def extensions(self) -> UnsupportedCapabilities:
        """Standard operations the engine does not support."""
        self._check_open()
        return self._extensions

    # Transactions

    @property
    def auto_commit(self) -> bool:
        self._check_open()
        return self._auto_commit

    @property
    def transaction_state(self) -> TransactionState:
        self._check_open()
        if self._auto_commit:
            return TransactionState.AUTO_COMMIT
        return TransactionState.IN_TRANSACTION

    def set_auto_commit(self, auto_commit: bool) -> None:
        """Enter or leave auto-commit mode.

        Leaving sends ``begin;`` and returning sends ``commit;``. Setting
        the current mode again does nothing.
        """
        engine = self._check_open()
        if self._auto_commit == auto_commit:
            return
        engine.execute(COMMIT if auto_commit else BEGIN)
        self._auto_commit = auto_commit
        logger.debug(f"Auto-commit {'on' if auto_commit else 'off'}: {self._url}")

    def commit(self) -> None:
        engine = self._check_transaction()
        engine.execute(COMMIT)
        engine.execute(BEGIN)

    def rollback(self) -> None:
        engine = self._check_transaction()
        engine.execute(ROLLBACK)
        engine.execute(BEGIN)

    @property
    def isolation_level(self) -> IsolationLevel:
        self._check_open()
        return self._isolation_level

    def set_isolation_level(self, level: IsolationLevel | str) -> None:
        """Switch between SERIALIZABLE and READ_UNCOMMITTED.

        Raises:
            UnsupportedOperationError: For any other level
        """
        engine = self._check_open()
        try:
            level = IsolationLevel(level)
        except ValueError as e:
            raise UnsupportedOperationError(
                f"unknown isolation level: {level!r}"
            ) from e
        if level == IsolationLevel.SERIALIZABLE:
            engine.execute("PRAGMA read_uncommitted = false;")
        elif level == IsolationLevel.READ_UNCOMMITTED:
            engine.execute("PRAGMA read_uncommitted = true;")
        else:
            raise UnsupportedOperationError(
                "SQLite supports only SERIALIZABLE and READ_UNCOMMITTED "
                f"isolation, got {level.name}"
            )
        self._isolation_level = level

    # Savepoints

    def set_savepoint(self, name: str | None = None) -> Savepoint:
        """Create a savepoint, numbered unless ``name`` is given."""
        engine = self._check_open()
        if name is None:
            savepoint = self._savepoints.anonymous()
        else:
            savepoint = self._savepoints.named(name)
        engine.execute(f"SAVEPOINT {savepoint.identifier};")
        return savepoint

    def release_savepoint(self, savepoint: Savepoint) -> None:
        self._check_open().execute(f"RELEASE SAVEPOINT {savepoint.identifier};")

    def rollback_to(self, savepoint: Savepoint) -> None:
        self._check_open().execute(f"ROLLBACK TO SAVEPOINT {savepoint.identifier};")

    # Statements

    @property
    def holdability(self) -> Holdability:
        self._check_open()
        return SUPPORTED_HOLDABILITY

    def set_holdability(self, holdability: Holdability | str) -> None:
        self._check_open()
        check_holdability(holdability)

    def create_statement(
        self,
        result_type: ResultSetType | str = ResultSetType.FORWARD_ONLY,
        concurrency: Concurrency | str = Concurrency.READ_ONLY,
        holdability: Holdability | str = Holdability.CLOSE_CURSORS_AT_COMMIT,
    ) -> Statement:
        check_cursor(result_type, concurrency, holdability)
        self._check_open()
        return Statement(self)

    def prepare_statement(
        self,
        sql: str,
        result_type: ResultSetType | str = ResultSetType.FORWARD_ONLY,
        concurrency: Concurrency | str = Concurrency.READ_ONLY,
        holdability: Holdability | str = Holdability.CLOSE_CURSORS_AT_COMMIT,
    ) -> PreparedStatement:
        check_cursor(result_type, concurrency, holdability)
        self._check_open()
        return PreparedStatement(self, sql)

    def native_sql(self, sql: str) -> str:
        self._check_open()
        return sql

    # Placeholders with no engine behaviour

    @property
    def catalog(self) -> None:
        self._check_open()
        return None

    def set_catalog(self, catalog: str) -> None:
        self._check_open()

    @property
    def warnings(self) -> None:
        self._check_open()
        return None

    def clear_warnings(self) -> None:
        self._check_open()

    def _check_open(self) -> EngineHandle:
        if self._engine is None:
            raise StateError("database connection closed")
        return self._engine

    def _check_transaction(self) -> EngineHandle:
        engine = self._check_open()
        if self._auto_commit:
            raise StateError("database in auto-commit mode")
        return engine

    def __enter__(self) -> "Connection":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
