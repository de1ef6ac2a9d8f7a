"""Global pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from logging import Logger
from pathlib import Path

import pytest

from liteconn import setup_test_logging
from liteconn.database import Connection, ConnectionConfig, SQLiteEngine
from liteconn.types import StatementParamType


class RecordingEngine(SQLiteEngine):
    """SQLite engine that remembers every call it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.commands: list[str] = []
        self.queries: list[str] = []
        self.busy_timeouts: list[int] = []
        self.open_calls: list[tuple[str, bool]] = []

    def open(self, path: str, shared_cache: bool = False) -> None:
        self.open_calls.append((path, shared_cache))
        super().open(path, shared_cache=shared_cache)

    def execute(self, command: str) -> None:
        self.commands.append(command)
        super().execute(command)

    def query(self, sql: str, params: StatementParamType = None):
        self.queries.append(sql)
        return super().query(sql, params)

    def set_busy_timeout(self, ms: int) -> None:
        self.busy_timeouts.append(ms)
        super().set_busy_timeout(ms)

    @property
    def call_count(self) -> int:
        return len(self.commands) + len(self.queries)


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from liteconn import get_logger

    return get_logger("test")


@pytest.fixture
def recording_engines() -> list[RecordingEngine]:
    """Every engine created by ``engine_factory`` in a test."""
    return []


@pytest.fixture
def engine_factory(
    recording_engines: list[RecordingEngine],
) -> Callable[[], RecordingEngine]:
    """Engine factory that keeps hold of the engines it creates."""

    def factory() -> RecordingEngine:
        engine = RecordingEngine()
        recording_engines.append(engine)
        return engine

    return factory


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path using pytest's tmp_path."""
    return tmp_path / "test.db"


@pytest.fixture
def memory_connection(
    engine_factory: Callable[[], RecordingEngine],
) -> Generator[Connection, None, None]:
    """Open in-memory connection backed by a recording engine."""
    connection = Connection(
        ConnectionConfig(url="sqlite::memory:", target=":memory:"), engine_factory
    )
    yield connection
    connection.close()


@pytest.fixture
def engine(
    memory_connection: Connection, recording_engines: list[RecordingEngine]
) -> RecordingEngine:
    """The recording engine behind ``memory_connection``."""
    return recording_engines[0]


@pytest.fixture
def file_connection(
    temp_db_path: Path, engine_factory: Callable[[], RecordingEngine]
) -> Generator[Connection, None, None]:
    """Open file-backed connection backed by a recording engine."""
    connection = Connection(
        ConnectionConfig(url=f"sqlite:{temp_db_path}", target=str(temp_db_path)),
        engine_factory,
    )
    yield connection
    connection.close()
