"""
Value comparison rules shared by Arr and Collection.

``strict_equals`` requires identical types all the way down, ``loose_equals``
coerces numbers, numeric strings and booleans, and ``compare`` is the total
default ordering used when sorting without a comparator.
"""

from __future__ import annotations

import operator as op
import re
from typing import Any, Callable, Dict, Final, Mapping, Optional, Union

Number = Union[int, float]

_NUMERIC = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')

# Rank used when two values of unrelated types are ordered
_TYPE_RANK: Final = {
    'none': 0,
    'bool': 1,
    'number': 2,
    'text': 3,
    'container': 4,
    'other': 5,
}


def is_number(value: Any) -> bool:
    """Check if value is an int or float (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """Check if value is a number or a numeric string."""
    if is_number(value):
        return True
    return isinstance(value, str) and bool(_NUMERIC.match(value))


def to_number(value: Any) -> Number:
    """Convert a numeric value or numeric string to a number."""
    if is_number(value):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def strict_equals(left: Any, right: Any) -> bool:
    """Compare two values requiring the same type and value."""
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        if list(left.keys()) != list(right.keys()):
            return False
        return all(strict_equals(left[k], right[k]) for k in left)
    if isinstance(left, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(strict_equals(a, b) for a, b in zip(left, right))
    return bool(left == right)


def loose_equals(left: Any, right: Any) -> bool:
    """Compare two values with type coercion."""
    if left is None or right is None:
        if left is None and right is None:
            return True
        other = right if left is None else left
        return not other if isinstance(other, (bool, str, int, float, list, dict, tuple)) else False
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)
    if is_number(left) and is_number(right):
        return bool(left == right)
    if is_number(left) or is_number(right):
        if is_numeric(left) and is_numeric(right):
            return to_number(left) == to_number(right)
        return False
    if isinstance(left, str) and isinstance(right, str):
        if is_numeric(left) and is_numeric(right):
            return to_number(left) == to_number(right)
        return left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if len(left) != len(right):
            return False
        return all(k in right and loose_equals(v, right[k]) for k, v in left.items())
    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(loose_equals(a, b) for a, b in zip(left, right))
    return bool(left == right)


def _kind(value: Any) -> str:
    if value is None:
        return 'none'
    if isinstance(value, bool):
        return 'bool'
    if is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'text'
    if isinstance(value, (dict, list, tuple)):
        return 'container'
    return 'other'


def _sign(value: Any) -> int:
    return (value > 0) - (value < 0)


def compare(left: Any, right: Any) -> int:
    """Order two values, returning -1, 0 or 1."""
    left_kind, right_kind = _kind(left), _kind(right)

    if left_kind == 'number' and right_kind == 'text' and is_numeric(right):
        return _sign(left - to_number(right))
    if left_kind == 'text' and right_kind == 'number' and is_numeric(left):
        return _sign(to_number(left) - right)
    if left_kind != right_kind:
        return _sign(_TYPE_RANK[left_kind] - _TYPE_RANK[right_kind])

    if left_kind == 'none':
        return 0
    if left_kind in ('bool', 'number'):
        return _sign(left - right)
    if left_kind == 'text':
        if is_numeric(left) and is_numeric(right):
            return _sign(to_number(left) - to_number(right))
        return (left > right) - (left < right)
    if left_kind == 'container':
        return _compare_containers(left, right)

    try:
        return (left > right) - (left < right)
    except TypeError:
        return (repr(left) > repr(right)) - (repr(left) < repr(right))


def _compare_containers(left: Any, right: Any) -> int:
    """Containers order by size first, then element by element."""
    if len(left) != len(right):
        return _sign(len(left) - len(right))

    if isinstance(left, dict) and isinstance(right, dict):
        for key, value in left.items():
            if key not in right:
                return 1
            result = compare(value, right[key])
            if result:
                return result
        return 0

    left_values = list(left.values()) if isinstance(left, dict) else list(left)
    right_values = list(right.values()) if isinstance(right, dict) else list(right)
    for a, b in zip(left_values, right_values):
        result = compare(a, b)
        if result:
            return result
    return 0


def compare_keys(left: Any, right: Any) -> int:
    """Order mapping keys: integers first (numerically), then strings."""
    left_is_int, right_is_int = isinstance(left, int), isinstance(right, int)
    if left_is_int != right_is_int:
        return -1 if left_is_int else 1
    return (left > right) - (left < right)


def _loose_ne(left: Any, right: Any) -> bool:
    return not loose_equals(left, right)


def _strict_ne(left: Any, right: Any) -> bool:
    return not strict_equals(left, right)


def _ordered(check: Callable[[int], bool]) -> Callable[[Any, Any], bool]:
    def compare_with(left: Any, right: Any) -> bool:
        if left is None or right is None:
            return False
        return check(compare(left, right))
    return compare_with


ORDERING_OPERATORS: Final[Dict[str, Callable[[Any, Any], bool]]] = {
    '<': _ordered(lambda r: op.lt(r, 0)),
    '<=': _ordered(lambda r: op.le(r, 0)),
    '>': _ordered(lambda r: op.gt(r, 0)),
    '>=': _ordered(lambda r: op.ge(r, 0)),
}


def operator_for(operator: str, strict: bool) -> Optional[Callable[[Any, Any], bool]]:
    """Resolve a comparison operator symbol to a predicate."""
    operators_map: Dict[str, Callable[[Any, Any], bool]] = {
        '=': strict_equals if strict else loose_equals,
        '==': strict_equals if strict else loose_equals,
        '===': strict_equals,
        '!=': _strict_ne if strict else _loose_ne,
        '<>': _strict_ne if strict else _loose_ne,
        '!==': _strict_ne,
        **ORDERING_OPERATORS,
    }
    return operators_map.get(operator)


OPERATORS: Final = ('=', '==', '===', '!=', '<>', '!==', '<', '<=', '>', '>=')
