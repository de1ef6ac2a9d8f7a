"""Connection layer over the embedded SQLite engine."""

from .capabilities import UnsupportedCapabilities
from .connection import Connection, ConnectionConfig
from .cursor import check_cursor
from .implementations.sqlite import SQLiteEngine
from .interfaces import EngineHandle
from .metadata import MetaData
from .path_resolver import ResolvedTarget, resolve_target
from .savepoint import Savepoint, SavepointSequencer
from .statement import PreparedStatement, Statement

__all__ = [
    "Connection",
    "ConnectionConfig",
    "EngineHandle",
    "SQLiteEngine",
    "MetaData",
    "PreparedStatement",
    "ResolvedTarget",
    "Savepoint",
    "SavepointSequencer",
    "Statement",
    "UnsupportedCapabilities",
    "check_cursor",
    "resolve_target",
]
