"""SQLite engine handle implementation."""

import sqlite3
from datetime import date, datetime, time
from pathlib import Path

from liteconn.constants import MEMORY_TARGET, MILLIS_PER_DAY, UNIX_EPOCH_JULIAN_DAY
from liteconn.database.interfaces import EngineHandle
from liteconn.exceptions import ResourceError, StateError
from liteconn.log import get_logger
from liteconn.types import StatementParamType

logger = get_logger(__name__)


class SQLiteEngine(EngineHandle):
    """Engine handle backed by the ``sqlite3`` module."""

    def __init__(self) -> None:
        super().__init__()
        self._connection: sqlite3.Connection | None = None
        self.path: str | None = None

    def open(self, path: str, shared_cache: bool = False) -> None:
        """Open the SQLite database at ``path``.

        Args:
            path: Absolute database path or ``:memory:``
            shared_cache: Open through a ``cache=shared`` URI
        """
        if self._connection is not None:
            raise StateError(f"Engine already open: {self.path}")

        try:
            if shared_cache:
                self._connection = sqlite3.connect(
                    _shared_cache_uri(path),
                    uri=True,
                    isolation_level=None,
                    check_same_thread=False,
                )
            else:
                # isolation_level=None keeps sqlite3 from issuing implicit BEGINs
                self._connection = sqlite3.connect(
                    path,
                    isolation_level=None,
                    check_same_thread=False,
                )
        except sqlite3.Error as e:
            logger.error(f"Failed to open SQLite database {path}: {e}")
            raise ResourceError(str(e)) from e

        self.path = path
        logger.debug(f"Opened SQLite engine: {path} (shared_cache={shared_cache})")

    def close(self) -> None:
        if self._connection is None:
            return
        try:
            self._connection.close()
        except sqlite3.Error as e:
            logger.error(f"Failed to close SQLite database {self.path}: {e}")
            raise ResourceError(str(e)) from e
        finally:
            self._connection = None
        logger.debug(f"Closed SQLite engine: {self.path}")

    def execute(self, command: str) -> None:
        self.query(command).close()

    def query(self, sql: str, params: StatementParamType = None) -> sqlite3.Cursor:
        connection = self._connected()
        try:
            if params:
                return connection.execute(sql, params)
            return connection.execute(sql)
        except sqlite3.Error as e:
            logger.error(f"Query execution failed: {e}")
            raise ResourceError(str(e)) from e

    def executescript(self, script: str) -> sqlite3.Cursor:
        try:
            return self._connected().executescript(script)
        except sqlite3.Error as e:
            logger.error(f"Script execution failed: {e}")
            raise ResourceError(str(e)) from e

    def set_busy_timeout(self, ms: int) -> None:
        self.query(f"PRAGMA busy_timeout = {int(ms)}").close()

    def libversion(self) -> str:
        cursor = self.query("select sqlite_version();")
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        return str(row[0])

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def encode_datetime(self, value: date) -> int | float:
        """Encode ``value`` as epoch milliseconds or a julian day number."""
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        millis = int(value.timestamp() * 1000)
        if self.julian_day_mode:
            return UNIX_EPOCH_JULIAN_DAY + millis / MILLIS_PER_DAY
        return millis

    def _connected(self) -> sqlite3.Connection:
        if self._connection is None:
            raise StateError("SQLite engine is not open")
        return self._connection


def _shared_cache_uri(path: str) -> str:
    if path == MEMORY_TARGET:
        return "file::memory:?cache=shared"
    return f"{Path(path).as_uri()}?cache=shared"
