"""JSON round-tripping for plain values and dataclass objects."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON representation of ``value``.

    Output is compact unless ``indent`` is given. Mapping keys keep their own
    order and dataclass instances serialize as their fields.

    Examples:
        [1, 2, 3]                          -> '[1,2,3]'
        Rectangle(width=10, height=20)     -> '{"width":10,"height":20}'
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(value, default=_default, indent=indent, separators=separators)


def from_json(proto: type[T] | T, text: str) -> T:
    """Construct an object of ``proto``'s type from its JSON representation.

    ``proto`` may be a class or an instance of one. The parsed object's values
    are passed positionally to the constructor in document order.
    """
    cls = proto if isinstance(proto, type) else type(proto)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    return cls(*data.values())
