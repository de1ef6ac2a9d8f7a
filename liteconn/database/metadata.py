"""Connection metadata."""

from typing import TYPE_CHECKING

from liteconn.constants import (
    DRIVER_MAJOR_VERSION,
    DRIVER_MINOR_VERSION,
    DRIVER_NAME,
    SUPPORTED_CONCURRENCY,
    SUPPORTED_HOLDABILITY,
    SUPPORTED_ISOLATION_LEVELS,
    SUPPORTED_RESULT_SET_TYPE,
)
from liteconn.exceptions import StateError
from liteconn.types import Concurrency, Holdability, IsolationLevel, ResultSetType

if TYPE_CHECKING:
    from liteconn.database.connection import Connection


class MetaData:
    """Facts about a connection and the engine behind it.

    Created on first access through ``Connection.metadata`` and closed
    together with the connection.
    """

    def __init__(self, connection: "Connection") -> None:
        self._connection: "Connection | None" = connection

    @property
    def is_closed(self) -> bool:
        return self._connection is None

    def close(self) -> None:
        self._connection = None

    @property
    def connection(self) -> "Connection":
        if self._connection is None:
            raise StateError("database metadata closed")
        return self._connection

    @property
    def url(self) -> str:
        return self.connection.url

    @property
    def driver_name(self) -> str:
        return DRIVER_NAME

    @property
    def driver_version(self) -> str:
        return (
            f"{DRIVER_MAJOR_VERSION}.{DRIVER_MINOR_VERSION} "
            f"({self.connection.driver_version()})"
        )

    @property
    def database_product_version(self) -> str:
        return self.connection.libversion()

    @property
    def is_read_only(self) -> bool:
        return self.connection.read_only

    @property
    def default_isolation_level(self) -> IsolationLevel:
        return IsolationLevel.SERIALIZABLE

    def supports_isolation_level(self, level: IsolationLevel) -> bool:
        return level in SUPPORTED_ISOLATION_LEVELS

    def supports_result_set(
        self,
        result_type: ResultSetType,
        concurrency: Concurrency = SUPPORTED_CONCURRENCY,
    ) -> bool:
        return (
            result_type == SUPPORTED_RESULT_SET_TYPE
            and concurrency == SUPPORTED_CONCURRENCY
        )

    def supports_holdability(self, holdability: Holdability) -> bool:
        return holdability == SUPPORTED_HOLDABILITY

    @property
    def supports_savepoints(self) -> bool:
        return True
