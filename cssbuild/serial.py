from __future__ import annotations

import json
from typing import Any, TypeVar

__all__ = ["get_json", "from_json"]

T = TypeVar("T")

def _fields_(obj: Any) -> dict[str, Any]:
    """Instance attributes of `obj`, from both `__dict__` and `__slots__`."""
    fields: dict[str, Any] = {}
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if hasattr(obj, slot):
                fields[slot] = getattr(obj, slot)
    if hasattr(obj, "__dict__"):
        fields.update(vars(obj))
    return fields

def _prune_(value: Any) -> Any:
    """Drop callables from dicts and null them in lists, as `JSON.stringify` does."""
    if isinstance(value, dict):
        return {key: _prune_(item) for key, item in value.items() if not callable(item)}
    if isinstance(value, (list, tuple)):
        return [None if callable(item) else _prune_(item) for item in value]
    return value

def _default_(obj: Any) -> dict[str, Any]:
    if callable(obj):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    slotted = any("__slots__" in cls.__dict__ for cls in type(obj).__mro__)
    if not slotted and not hasattr(obj, "__dict__"):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    return _prune_(_fields_(obj))

def get_json(obj: Any) -> str:
    """Returns the compact JSON representation of `obj`.

    Objects that are not natively supported by `json` are encoded from their
    instance attributes.

    Example:
        [1, 2, 3] => '[1,2,3]'
        Rectangle(10, 20) => '{"width":10,"height":20}'
    """
    return json.dumps(_prune_(obj), separators=(",", ":"), default=_default_)

def from_json(proto: type[T], text: str) -> T:
    """Returns an instance of `proto` populated with the fields decoded from `text`.

    `proto.__init__` is not called; the decoded fields are set directly as
    attributes so the result exposes `proto`'s methods over the decoded data.

    Raises
        TypeError: If `text` does not decode to a JSON object.
        json.JSONDecodeError: If `text` is not valid JSON.
        AttributeError: If `proto` uses `__slots__` and a field has no slot.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

    result = proto.__new__(proto)
    for key, value in data.items():
        setattr(result, key, value)
    return result
