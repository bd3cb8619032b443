from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from collectkit.Support.Callbacks import call_with_key
from collectkit.Support.Comparison import compare, compare_keys
from collectkit.Support.Data import (
    data_forget,
    data_get,
    data_has,
    data_set,
    resolve_key,
    segments,
    value,
)
from collectkit.Support.Normalizer import normalize_key
from collectkit.Support.Types import Key, OrderedMapping, is_accessible

Comparator = Callable[[Any, Any], int]
ArrayLike = Union[Dict[Any, Any], List[Any]]


def _items(data: Any) -> OrderedMapping:
    """View a dict or list as an ordered mapping."""
    if isinstance(data, dict):
        return data
    if isinstance(data, (list, tuple)):
        return dict(enumerate(data))
    from collectkit.Support.Normalizer import get_arrayable_items
    return get_arrayable_items(data)


def _values(data: Any) -> List[Any]:
    """Values of a nested mapping-like value, in order."""
    from collectkit.Support.Collection import Collection

    if isinstance(data, Collection):
        return data.to_list()
    if isinstance(data, dict):
        return list(data.values())
    return list(data)


def _is_nested(data: Any) -> bool:
    from collectkit.Support.Collection import Collection
    return is_accessible(data) or isinstance(data, Collection)


def _rekey(pairs: Iterable[Tuple[Key, Any]]) -> OrderedMapping:
    """Renumber integer keys from zero, keeping string keys."""
    result: OrderedMapping = {}
    index = 0
    for key, item in pairs:
        if isinstance(key, int):
            result[index] = item
            index += 1
        else:
            result[key] = item
    return result


class Arr:
    """Array helper class with dot notation support."""

    @staticmethod
    def accessible(data: Any) -> bool:
        """Determine whether the given value is array accessible."""
        return is_accessible(data)

    @staticmethod
    def exists(data: ArrayLike, key: Key) -> bool:
        """Determine if the given key exists in the provided array."""
        if not is_accessible(data):
            return False
        found, _ = resolve_key(data, key)
        return found

    @staticmethod
    def add(data: ArrayLike, key: Any, item: Any) -> Any:
        """Add an element to an array using dot notation if it doesn't exist."""
        if Arr.get(data, key) is None:
            return Arr.set(data, key, item)
        return data

    @staticmethod
    def divide(data: ArrayLike) -> Tuple[List[Key], List[Any]]:
        """Divide an array into two arrays: keys and values."""
        items = _items(data)
        return list(items.keys()), list(items.values())

    @staticmethod
    def dot(data: ArrayLike, prepend: str = '') -> Dict[str, Any]:
        """Flatten a multi-dimensional associative array with dots."""
        results: Dict[str, Any] = {}

        for key, item in _items(data).items():
            if is_accessible(item) and item:
                results.update(Arr.dot(item, f"{prepend}{key}."))
            else:
                results[f"{prepend}{key}"] = item

        return results

    @staticmethod
    def undot(data: Dict[str, Any]) -> OrderedMapping:
        """Convert a flattened "dot" notation array back into an expanded array."""
        result: OrderedMapping = {}
        for key, item in data.items():
            Arr.set(result, key, item)
        return result

    @staticmethod
    def except_(data: ArrayLike, keys: Any) -> OrderedMapping:
        """Get all of the given array except for a specified array of keys."""
        result = dict(_items(data))

        for key in Arr.wrap(keys):
            # Detach containers along the path so the input stays untouched
            current: Any = result
            for segment in segments(key)[:-1]:
                if not is_accessible(current):
                    break
                found, actual = resolve_key(current, segment)
                if not found or not is_accessible(current[actual]):
                    break
                current[actual] = dict(current[actual]) if isinstance(current[actual], dict) else list(current[actual])
                current = current[actual]
            data_forget(result, key)

        return result

    @staticmethod
    def only(data: ArrayLike, keys: Any) -> OrderedMapping:
        """Get a subset of the items from the given array."""
        items = _items(data)
        wanted = Arr.wrap(keys)
        result: OrderedMapping = {}

        # Top-level keys keep the source order
        for key, item in items.items():
            if any(resolve_key({key: None}, candidate)[0] for candidate in wanted):
                result[key] = item

        for key in wanted:
            if isinstance(key, str) and '.' in key and Arr.has(items, key):
                Arr.set(result, key, Arr.get(items, key))

        return result

    @staticmethod
    def first(data: ArrayLike, callback: Optional[Callable[..., bool]] = None, default: Any = None) -> Any:
        """Return the first element in an array passing a given truth test."""
        items = _items(data)

        if callback is None:
            return next(iter(items.values())) if items else value(default)

        for key, item in items.items():
            if call_with_key(callback, item, key, key_first=True):
                return item
        return value(default)

    @staticmethod
    def last(data: ArrayLike, callback: Optional[Callable[..., bool]] = None, default: Any = None) -> Any:
        """Return the last element in an array passing a given truth test."""
        items = _items(data)

        if callback is None:
            return next(reversed(items.values())) if items else value(default)

        for key, item in reversed(items.items()):
            if call_with_key(callback, item, key, key_first=True):
                return item
        return value(default)

    @staticmethod
    def flatten(data: Any, depth: Union[int, float] = float('inf')) -> List[Any]:
        """Flatten a multi-dimensional array into a single level."""
        result: List[Any] = []

        for item in _values(data):
            if not _is_nested(item):
                result.append(item)
            elif depth <= 1:
                result.extend(_values(item))
            else:
                result.extend(Arr.flatten(item, depth - 1))

        return result

    @staticmethod
    def collapse(data: Any) -> List[Any]:
        """Collapse an array of arrays into a single array."""
        result: List[Any] = []
        for item in _items(data).values():
            if _is_nested(item):
                result.extend(_values(item))
            else:
                result.append(item)
        return result

    @staticmethod
    def is_assoc(data: ArrayLike) -> bool:
        """Determine if an array is associative."""
        if isinstance(data, list):
            return False
        return list(data.keys()) != list(range(len(data)))

    @staticmethod
    def pluck(data: Any, item_value: Any, key: Any = None) -> OrderedMapping:
        """Pluck an array of values from an array."""
        results: OrderedMapping = {}

        for item in _items(data).values():
            plucked = data_get(item, item_value)
            if key is None:
                results[len(results)] = plucked
            else:
                results[normalize_key(data_get(item, key))] = plucked

        return results

    @staticmethod
    def prepend(data: ArrayLike, item: Any, key: Optional[Key] = None) -> OrderedMapping:
        """Push an item onto the beginning of an array."""
        items = _items(data)

        if key is None:
            return _rekey([(0, item), *items.items()])

        result: OrderedMapping = {key: item}
        result.update((k, v) for k, v in items.items() if k != key)
        return result

    @staticmethod
    def pull(data: ArrayLike, key: Any, default: Any = None) -> Any:
        """Get a value from the array, and remove it."""
        item = Arr.get(data, key, default)
        Arr.forget(data, key)
        return item

    @staticmethod
    def sort(
        data: ArrayLike,
        comparator: Optional[Comparator] = None,
        key: Optional[Callable[[Any], Any]] = None,
    ) -> OrderedMapping:
        """Sort the array by value, keeping keys with their values."""
        cmp = comparator or compare
        pairs = list(_items(data).items())

        if key is None:
            ordered = sorted(pairs, key=cmp_to_key(lambda a, b: cmp(a[1], b[1])))
        else:
            decorated = [(key(item), k, item) for k, item in pairs]
            decorated.sort(key=cmp_to_key(lambda a, b: cmp(a[0], b[0])))
            ordered = [(k, item) for _, k, item in decorated]

        return dict(ordered)

    @staticmethod
    def sort_recursive(data: Any, comparator: Optional[Comparator] = None) -> Any:
        """Recursively sort an array by keys and values."""
        cmp = comparator or compare

        if isinstance(data, list):
            children = [Arr.sort_recursive(item, comparator) for item in data]
            return sorted(children, key=cmp_to_key(cmp))

        if isinstance(data, dict):
            children_map = {k: Arr.sort_recursive(item, comparator) for k, item in data.items()}
            if Arr.is_assoc(children_map):
                return dict(sorted(children_map.items(), key=cmp_to_key(lambda a, b: compare_keys(a[0], b[0]))))
            return dict(enumerate(sorted(children_map.values(), key=cmp_to_key(cmp))))

        return data

    @staticmethod
    def where(data: ArrayLike, callback: Callable[..., bool]) -> OrderedMapping:
        """Filter the array using the given callback."""
        return {
            key: item for key, item in _items(data).items()
            if call_with_key(callback, item, key, key_first=True)
        }

    @staticmethod
    def slice(data: ArrayLike, offset: int, length: Optional[int] = None, preserve_keys: bool = False) -> OrderedMapping:
        """Extract a slice of the array."""
        pairs = list(_items(data).items())
        start, end = _bounds(len(pairs), offset, length)
        selected = pairs[start:end]
        return dict(selected) if preserve_keys else _rekey(selected)

    @staticmethod
    def splice(data: OrderedMapping, offset: int, length: Optional[int] = None, replacement: Any = None) -> OrderedMapping:
        """Remove a portion of the array in place and replace it with something else."""
        pairs = list(data.items())
        start, end = _bounds(len(pairs), offset, length)
        removed = pairs[start:end]

        inserted = [(index, item) for index, item in enumerate(_replacement_values(replacement))]
        remaining = pairs[:start] + inserted + pairs[end:]

        data.clear()
        data.update(_rekey(remaining))
        return _rekey(removed)

    @staticmethod
    def merge(*arrays: ArrayLike) -> OrderedMapping:
        """Merge arrays: string keys overwrite, integer keys append."""
        pairs: List[Tuple[Key, Any]] = []
        positions: Dict[Key, int] = {}

        for array in arrays:
            for key, item in _items(array).items():
                if isinstance(key, str) and key in positions:
                    pairs[positions[key]] = (key, item)
                    continue
                if isinstance(key, str):
                    positions[key] = len(pairs)
                pairs.append((key, item))

        return _rekey(pairs)

    @staticmethod
    def wrap(item: Any) -> List[Any]:
        """Wrap the given value in an array if it's not already an array."""
        if item is None:
            return []
        if isinstance(item, tuple):
            return list(item)
        return item if isinstance(item, list) else [item]

    @staticmethod
    def get(data: Any, key: Any, default: Any = None) -> Any:
        """Get an item from an array using dot notation."""
        return data_get(data, key, default)

    @staticmethod
    def has(data: Any, keys: Any) -> bool:
        """Check if an item or items exist in an array using dot notation."""
        return data_has(data, keys)

    @staticmethod
    def set(data: Any, key: Any, item: Any) -> Any:
        """Set an array item to a given value using dot notation."""
        return data_set(data, key, item)

    @staticmethod
    def forget(data: Any, keys: Any) -> Any:
        """Remove one or many array items from a given array using dot notation."""
        return data_forget(data, keys)


def _bounds(count: int, offset: int, length: Optional[int]) -> Tuple[int, int]:
    """Resolve slice offsets the way array_slice does."""
    start = offset if offset >= 0 else max(count + offset, 0)
    start = min(start, count)

    if length is None:
        end = count
    elif length >= 0:
        end = min(start + length, count)
    else:
        end = max(count + length, start)

    return start, end


def _replacement_values(replacement: Any) -> List[Any]:
    if replacement is None:
        return []
    if isinstance(replacement, (list, tuple)):
        return list(replacement)
    if isinstance(replacement, dict):
        return list(replacement.values())
    from collectkit.Support.Collection import Collection
    if isinstance(replacement, Collection):
        return replacement.to_list()
    return [replacement]
