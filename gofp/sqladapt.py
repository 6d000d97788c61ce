"""Conversion between Option values and database parameter values."""

from __future__ import annotations

import datetime
import sqlite3
from typing import Any, Callable, TypeVar

from gofp.option import Option, none, some

T = TypeVar("T")

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class UnsupportedTypeError(TypeError):
    """Raised when a value has no database representation."""


def _convert(value: Any) -> Any:
    if isinstance(value, Option):
        return to_sql_value(value)
    if value is None or isinstance(value, (bool, float, str, bytes, datetime.datetime)):
        return value
    if isinstance(value, int):
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise UnsupportedTypeError("integer values outside the 64-bit range are not supported")
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise UnsupportedTypeError(f"unsupported type {type(value).__name__}")


def to_sql_value(option: Option[Any]) -> Any:
    """Return the database value for ``option``: None when empty."""
    if option.is_none():
        return None
    return _convert(option.unwrap())


def from_sql_value(src: Any, convert: Callable[[Any], T]) -> Option[T]:
    """Build an Option from a column value: NULL gives None, else Some(convert(src))."""
    if src is None:
        return none()
    if not callable(convert):
        raise UnsupportedTypeError(f"unsupported type {type(convert).__name__}")
    return some(convert(src))


def register_sqlite_adapter() -> None:
    """Let sqlite3 accept Option values as query parameters."""
    sqlite3.register_adapter(Option, to_sql_value)