"""Savepoint identifiers."""

from dataclasses import dataclass

from liteconn.constants import SAVEPOINT_PREFIX


@dataclass(frozen=True)
class Savepoint:
    """A marker in the engine's savepoint stack.

    Exactly one of ``name`` and ``sequence_id`` is set. The identifier is
    fixed when the savepoint is created and reused verbatim by release and
    rollback. Nothing here checks that the engine still holds the savepoint.
    """

    identifier: str
    name: str | None = None
    sequence_id: int | None = None

    @property
    def is_named(self) -> bool:
        return self.name is not None


class SavepointSequencer:
    """Hands out savepoints for one connection."""

    def __init__(self) -> None:
        self._next_id = 0

    @property
    def next_id(self) -> int:
        """The sequence id the next anonymous savepoint will get."""
        return self._next_id

    def anonymous(self) -> Savepoint:
        sequence_id = self._next_id
        self._next_id += 1
        return Savepoint(
            identifier=f"{SAVEPOINT_PREFIX}{sequence_id}", sequence_id=sequence_id
        )

    def named(self, name: str) -> Savepoint:
        # Duplicate names are left to the engine
        return Savepoint(identifier=name, name=name)
