from __future__ import annotations

import json
from typing import Any

from collectkit.Support.Types import is_arrayable, is_jsonable


def _is_dense(data: dict) -> bool:
    return list(data.keys()) == list(range(len(data)))


def prepare(value: Any) -> Any:
    """Convert a value into plain JSON-compatible structures."""
    from collectkit.Support.Collection import Collection

    if isinstance(value, Collection):
        return prepare(value.to_array())
    if is_arrayable(value):
        return prepare(value.to_array())
    if is_jsonable(value):
        return prepare(json.loads(value.to_json()))
    if isinstance(value, dict):
        # Dense index-keyed mappings render as arrays
        if value and _is_dense(value):
            return [prepare(item) for item in value.values()]
        return {str(key): prepare(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [prepare(item) for item in value]
    return value


def serialize(value: Any, **options: Any) -> str:
    """Serialize a value to JSON text."""
    options.setdefault('default', str)
    return json.dumps(prepare(value), **options)
