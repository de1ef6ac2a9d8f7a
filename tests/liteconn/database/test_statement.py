"""Tests for statements."""

from datetime import date, datetime, timezone

import pytest

from liteconn.database import Connection, ConnectionConfig
from liteconn.exceptions import ResourceError, StateError


class TestStatement:
    """Test plain statements."""

    def test_execute_and_fetch(self, memory_connection: Connection) -> None:
        statement = memory_connection.create_statement()
        statement.executescript(
            "CREATE TABLE item (name TEXT); INSERT INTO item VALUES ('a');"
        )

        assert statement.execute("SELECT name FROM item").fetchall() == [("a",)]

    def test_engine_error(self, memory_connection: Connection) -> None:
        with pytest.raises(ResourceError, match="no such table"):
            memory_connection.create_statement().execute("SELECT * FROM missing")

    def test_closed_statement(self, memory_connection: Connection) -> None:
        with memory_connection.create_statement() as statement:
            pass

        assert statement.is_closed is True
        with pytest.raises(StateError, match="statement closed"):
            statement.execute("SELECT 1")

    def test_statement_after_connection_close(self, memory_connection: Connection) -> None:
        statement = memory_connection.create_statement()
        memory_connection.close()

        with pytest.raises(StateError, match="database connection closed"):
            statement.execute("SELECT 1")

    def test_statement_leaves_connection_state(self, memory_connection: Connection, engine) -> None:
        memory_connection.create_statement().execute("SELECT 1")

        assert memory_connection.auto_commit is True
        assert engine.commands == []


class TestPreparedStatement:
    """Test prepared statements and parameter binding."""

    def test_positional_params(self, memory_connection: Connection) -> None:
        prepared = memory_connection.prepare_statement("SELECT ? + ?")

        assert prepared.execute((2, 3)).fetchone()[0] == 5

    def test_named_params(self, memory_connection: Connection) -> None:
        prepared = memory_connection.prepare_statement("SELECT :word")

        assert prepared.execute({"word": "hello"}).fetchone()[0] == "hello"

    def test_datetime_as_epoch_millis(self, memory_connection: Connection) -> None:
        prepared = memory_connection.prepare_statement("SELECT ?")
        moment = datetime(1970, 1, 2, tzinfo=timezone.utc)

        assert prepared.execute((moment,)).fetchone()[0] == 86_400_000

    def test_datetime_as_julian_day(self, engine_factory) -> None:
        config = ConnectionConfig(url="sqlite:", target=":memory:", julian_day=True)
        with Connection(config, engine_factory) as connection:
            prepared = connection.prepare_statement("SELECT ?")
            epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)

            assert prepared.execute([epoch]).fetchone()[0] == pytest.approx(2440587.5)

    def test_plain_date_is_encoded(self, memory_connection: Connection) -> None:
        prepared = memory_connection.prepare_statement("SELECT typeof(?)")

        assert prepared.execute((date(2024, 5, 1),)).fetchone()[0] == "integer"

    def test_unsupported_params(self, memory_connection: Connection) -> None:
        prepared = memory_connection.prepare_statement("SELECT ?")

        with pytest.raises(ValueError):
            prepared.execute("not a sequence")  # type: ignore[arg-type]
