"""Statement objects handed out by a connection."""

from datetime import date
from types import TracebackType
from typing import TYPE_CHECKING, Any

from liteconn.database.interfaces import EngineHandle
from liteconn.exceptions import StateError
from liteconn.types import StatementParamType

if TYPE_CHECKING:
    from liteconn.database.connection import Connection


class Statement:
    """Executes SQL text on the connection's engine."""

    def __init__(self, connection: "Connection") -> None:
        self.connection = connection
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def execute(self, sql: str) -> Any:
        """Execute ``sql`` and return the engine cursor."""
        return self._engine().query(sql)

    def executescript(self, script: str) -> Any:
        """Execute a semicolon separated script."""
        return self._engine().executescript(script)

    def close(self) -> None:
        self._closed = True

    def _engine(self) -> EngineHandle:
        if self._closed:
            raise StateError("statement closed")
        return self.connection.engine

    def __enter__(self) -> "Statement":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


class PreparedStatement(Statement):
    """A statement with fixed SQL and bound parameters."""

    def __init__(self, connection: "Connection", sql: str) -> None:
        super().__init__(connection)
        self.sql = sql

    def execute(self, params: StatementParamType = None) -> Any:  # type: ignore[override]
        """Execute the prepared SQL with ``params`` bound.

        Dates and datetimes are stored using the connection's temporal
        encoding (epoch milliseconds, or julian day numbers).
        """
        engine = self._engine()
        return engine.query(self.sql, bind_params(engine, params))


def bind_params(engine: EngineHandle, params: StatementParamType) -> StatementParamType:
    if params is None:
        return None
    if isinstance(params, dict):
        return {key: _adapt(engine, value) for key, value in params.items()}
    if isinstance(params, (list, tuple)):
        return tuple(_adapt(engine, value) for value in params)
    raise ValueError(f"Unsupported params type: {type(params)}")


def _adapt(engine: EngineHandle, value: Any) -> Any:
    if isinstance(value, date):
        return engine.encode_datetime(value)
    return value
