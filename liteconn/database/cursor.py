"""Result set capability checks."""

from enum import Enum
from typing import TypeVar

from liteconn.constants import (
    SUPPORTED_CONCURRENCY,
    SUPPORTED_HOLDABILITY,
    SUPPORTED_RESULT_SET_TYPE,
)
from liteconn.exceptions import UnsupportedOperationError
from liteconn.types import Concurrency, Holdability, ResultSetType

E = TypeVar("E", bound=Enum)


def check_cursor(
    result_type: ResultSetType | str,
    concurrency: Concurrency | str,
    holdability: Holdability | str,
) -> None:
    """Reject any cursor triple other than forward-only, read-only, close-at-commit.

    Raw enum values such as ``"forward_only"`` are accepted too.

    Raises:
        UnsupportedOperationError: Naming the first rejected dimension
    """
    result_type = _coerce(ResultSetType, result_type, "result_type")
    if result_type != SUPPORTED_RESULT_SET_TYPE:
        raise UnsupportedOperationError(
            "SQLite only supports FORWARD_ONLY cursors, "
            f"got result_type={result_type.name}",
            dimension="result_type",
        )
    concurrency = _coerce(Concurrency, concurrency, "concurrency")
    if concurrency != SUPPORTED_CONCURRENCY:
        raise UnsupportedOperationError(
            "SQLite only supports READ_ONLY cursors, "
            f"got concurrency={concurrency.name}",
            dimension="concurrency",
        )
    check_holdability(holdability)


def check_holdability(holdability: Holdability | str) -> None:
    holdability = _coerce(Holdability, holdability, "holdability")
    if holdability != SUPPORTED_HOLDABILITY:
        raise UnsupportedOperationError(
            "SQLite only supports closing cursors at commit, "
            f"got holdability={holdability.name}",
            dimension="holdability",
        )


def _coerce(enum_type: type[E], value: object, dimension: str) -> E:
    try:
        return enum_type(value)
    except ValueError as e:
        raise UnsupportedOperationError(
            f"unknown {dimension}: {value!r}", dimension=dimension
        ) from e
