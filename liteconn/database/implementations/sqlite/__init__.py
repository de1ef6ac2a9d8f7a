"""SQLite engine implementation package."""

from .sqlite_engine import SQLiteEngine

__all__ = [
    "SQLiteEngine",
]
