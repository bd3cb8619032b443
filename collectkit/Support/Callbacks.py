from __future__ import annotations

import inspect
from typing import Any, Callable


def positional_arity(callback: Callable[..., Any]) -> int:
    """Count the positional parameters a callback accepts (2 for *args)."""
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins such as str or len expose no signature
        return 1

    count = 0
    for parameter in sig.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 2
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def call_with_key(callback: Callable[..., Any], value: Any, key: Any, key_first: bool = False) -> Any:
    """Invoke callback with the value, adding the key when it is accepted."""
    arity = positional_arity(callback)
    if arity == 0:
        return callback()
    if arity == 1:
        return callback(value)
    if key_first:
        return callback(key, value)
    return callback(value, key)
