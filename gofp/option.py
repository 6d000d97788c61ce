"""A container for a value that may or may not be present."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


class UnwrapNoneError(ValueError):
    """Raised when the value of an empty Option is demanded."""

    def __init__(self) -> None:
        super().__init__("tried to unwrap None")


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Option(Generic[T]):
    """Holds either one value (Some) or nothing (None).

    ``Option(value)`` is Some, ``Option()`` is None.  A Some may hold the
    Python value ``None`` and is still distinct from an empty Option.
    Instances are immutable.
    """

    __slots__ = ("_some", "_value")

    _some: bool
    _value: Any

    def __init__(self, value: Any = _MISSING) -> None:
        object.__setattr__(self, "_some", value is not _MISSING)
        object.__setattr__(self, "_value", None if value is _MISSING else value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._some != other._some:
            return False
        return not self._some or self._value == other._value

    def __hash__(self) -> int:
        return hash((self._some, self._value))

    def __str__(self) -> str:
        return f"Some({self._value})" if self._some else "None"

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._some else "None"

    def is_some(self) -> bool:
        """True if a value is held."""
        return self._some

    def is_none(self) -> bool:
        """True if no value is held."""
        return not self._some

    def get(self) -> tuple[T | None, bool]:
        """Return the value (or None) and whether it is present."""
        return self._value, self._some

    def unwrap(self) -> T:
        """Return the value, raising UnwrapNoneError if there is none."""
        if not self._some:
            raise UnwrapNoneError()
        return self._value

    def unwrap_or_zero(self, kind: Callable[[], T]) -> T:
        """Return the value, or the zero value ``kind()`` if there is none."""
        return self._value if self._some else kind()

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if there is none."""
        return self._value if self._some else default

    def unwrap_or_else(self, default: Callable[[], T]) -> T:
        """Return the value, or the result of ``default()`` if there is none."""
        return self._value if self._some else default()

    def to_optional(self) -> T | None:
        """Return the value, or None if there is none."""
        return self._value if self._some else None

    def map(self, func: Callable[[T], U]) -> Option[U]:
        """Apply ``func`` to a held value; stay empty otherwise."""
        return Option(func(self._value)) if self._some else Option()

    def map_or(self, default: U, func: Callable[[T], U]) -> Option[U]:
        """Apply ``func`` to a held value; otherwise Some(default)."""
        return Option(func(self._value) if self._some else default)

    def map_or_else(self, default: Callable[[], U], func: Callable[[T], U]) -> Option[U]:
        """Apply ``func`` to a held value; otherwise Some(default())."""
        return Option(func(self._value) if self._some else default())

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Apply an Option-returning ``func`` to a held value; stay empty otherwise."""
        return func(self._value) if self._some else Option()


_NONE: Option[Any] = Option()


def some(value: T) -> Option[T]:
    """Return an Option holding ``value``."""
    return Option(value)


def none() -> Option[Any]:
    """Return an empty Option."""
    return _NONE


def from_optional(value: T | None) -> Option[T]:
    """Some(value) unless ``value`` is None."""
    return _NONE if value is None else Option(value)


def from_result(value: T, ok: bool) -> Option[T]:
    """Some(value) if ``ok`` is true, None otherwise."""
    return Option(value) if ok else _NONE


def from_try(func: Callable[..., T], *args: Any, **kwargs: Any) -> Option[T]:
    """Call ``func``; Some(result) if it returns, None if it raises."""
    try:
        result = func(*args, **kwargs)
    except Exception:
        return _NONE
    return Option(result)


def from_predicate(value: T, predicate: Callable[[T], bool]) -> Option[T]:
    """Some(value) if ``predicate(value)`` holds, None otherwise."""
    return Option(value) if predicate(value) else _NONE


def from_cast(value: Any, kind: Any) -> Option[Any]:
    """Some(value) if ``value`` is an instance of ``kind``, None otherwise."""
    return Option(value) if isinstance(value, kind) else _NONE


def as_option(value: Any, kind: Any) -> Option[Any]:
    """Turn ``value`` into an Option of ``kind`` on a best-effort basis.

    A plain value of ``kind`` becomes Some; an Option whose content fits
    ``kind`` (or that is empty) is returned as it is; anything else,
    including None, gives an empty Option.
    """
    if isinstance(value, Option):
        if value.is_none() or isinstance(value.unwrap(), kind):
            return value
        return _NONE
    if value is not None and isinstance(value, kind):
        return Option(value)
    return _NONE