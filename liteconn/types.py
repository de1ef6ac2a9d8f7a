"""Common type definitions for liteconn."""

from enum import Enum
from typing import Any, TypeAlias

StatementParamType: TypeAlias = dict[str, Any] | list[Any] | tuple[Any, ...] | None


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class IsolationLevel(str, Enum):
    """Transaction isolation levels a caller may request."""

    NONE = "none"
    READ_UNCOMMITTED = "read_uncommitted"
    READ_COMMITTED = "read_committed"
    REPEATABLE_READ = "repeatable_read"
    SERIALIZABLE = "serializable"


class TransactionState(str, Enum):
    """Transaction state of an open connection."""

    AUTO_COMMIT = "auto_commit"
    IN_TRANSACTION = "in_transaction"


class ResultSetType(str, Enum):
    """Scrolling behaviour of a result set."""

    FORWARD_ONLY = "forward_only"
    SCROLL_INSENSITIVE = "scroll_insensitive"
    SCROLL_SENSITIVE = "scroll_sensitive"


class Concurrency(str, Enum):
    """Whether a result set may be updated through the cursor."""

    READ_ONLY = "read_only"
    UPDATABLE = "updatable"


class Holdability(str, Enum):
    """What happens to open result sets when a transaction commits."""

    HOLD_CURSORS_OVER_COMMIT = "hold_cursors_over_commit"
    CLOSE_CURSORS_AT_COMMIT = "close_cursors_at_commit"


class Capability(str, Enum):
    """Connection operations with no counterpart in the engine."""

    STORED_PROCEDURES = "stored_procedures"
    TYPE_MAP = "type_map"
    CLOB = "clob"
    BLOB = "blob"
    NCLOB = "nclob"
    SQLXML = "sqlxml"
    ARRAY = "array"
    STRUCT = "struct"
    CLIENT_INFO = "client_info"
    GENERATED_KEYS = "generated_keys"
    UNWRAP = "unwrap"
