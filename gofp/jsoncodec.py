"""JSON encoding and decoding of Option values: Some as its value, None as null."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, TypeVar

from gofp.option import Option, none, some

T = TypeVar("T")


class OptionEncoder(json.JSONEncoder):
    """JSON encoder that writes Options and dataclass instances."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Option):
            return o.to_optional()
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return {f.name: getattr(o, f.name) for f in dataclasses.fields(o)}
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialise ``obj`` to compact JSON, encoding Options along the way."""
    kwargs.setdefault("cls", OptionEncoder)
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(obj, **kwargs)


def option_from_json(data: str | bytes | bytearray, decode: Callable[[Any], T]) -> Option[T]:
    """Read an Option from JSON text: null gives None, anything else Some(decode(value))."""
    parsed = json.loads(data)
    if parsed is None:
        return none()
    return some(decode(parsed))