"""Database interfaces module."""

from .engine import EngineHandle

__all__ = [
    "EngineHandle",
]
