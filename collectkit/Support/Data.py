"""
Dot-notation access to nested data.

Targets are dispatched on capability into four variants:

- MAPPING: dicts and lists, addressed by key or index
- INDEX_ACCESSIBLE: objects with ``__getitem__`` and ``__contains__``
- ATTRIBUTE_OBJECT: objects whose segments are attributes
- OPAQUE: scalars, text and None, which never contain anything
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Tuple, Union

from collectkit.Support.Types import SCALAR_TYPES, TEXT_TYPES, T, is_accessible, is_index_accessible
from collectkit.Utils.Logger import get_logger

logger = get_logger(__name__)


class TargetKind(Enum):
    """Shapes the path resolver knows how to traverse."""
    MAPPING = 'mapping'
    INDEX_ACCESSIBLE = 'index_accessible'
    ATTRIBUTE_OBJECT = 'attribute_object'
    OPAQUE = 'opaque'


class Deferred(Generic[T]):
    """A default value computed only when a lookup misses."""

    __slots__ = ('_producer',)

    def __init__(self, producer: Callable[[], T]) -> None:
        self._producer = producer

    def resolve(self) -> T:
        """Run the producer."""
        return self._producer()

    def __repr__(self) -> str:
        return f"Deferred({self._producer!r})"


def value(value: Union[T, Deferred[T]]) -> T:
    """Return the default value of the given value."""
    if isinstance(value, Deferred):
        return value.resolve()
    return value


def target_kind(target: Any) -> TargetKind:
    """Classify a target by the access capability it offers."""
    if is_accessible(target):
        return TargetKind.MAPPING
    if isinstance(target, SCALAR_TYPES):
        return TargetKind.OPAQUE
    if is_index_accessible(target):
        return TargetKind.INDEX_ACCESSIBLE
    if hasattr(target, '__dict__') or hasattr(type(target), '__slots__'):
        return TargetKind.ATTRIBUTE_OBJECT
    return TargetKind.OPAQUE


def segments(path: Any) -> List[Any]:
    """Split a path into its segments."""
    if isinstance(path, (list, tuple)):
        return list(path)
    if isinstance(path, str):
        return path.split('.')
    return [path]


def _int_key(segment: Any) -> Optional[int]:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment
    if isinstance(segment, str) and segment.isdigit() and (segment == '0' or not segment.startswith('0')):
        return int(segment)
    return None


def resolve_key(container: Any, segment: Any) -> Tuple[bool, Any]:
    """Find the actual key a segment addresses in a dict or list."""
    if isinstance(container, dict):
        if segment in container:
            return True, segment
        index = _int_key(segment)
        if index is not None and index in container:
            return True, index
        if isinstance(segment, int) and not isinstance(segment, bool) and str(segment) in container:
            return True, str(segment)
        return False, segment

    index = _int_key(segment)
    if index is not None and 0 <= index < len(container):
        return True, index
    return False, segment


def _step(target: Any, segment: Any) -> Tuple[bool, Any]:
    """Descend one segment, reporting whether it was present."""
    kind = target_kind(target)

    if kind is TargetKind.MAPPING:
        found, key = resolve_key(target, segment)
        return (True, target[key]) if found else (False, None)

    if kind is TargetKind.INDEX_ACCESSIBLE:
        # Tuples, ranges and other sequences are addressed by position
        if isinstance(target, Sequence) and not isinstance(target, TEXT_TYPES):
            found, key = resolve_key(target, segment)
            return (True, target[key]) if found else (False, None)
        try:
            if segment in target:
                return True, target[segment]
        except (KeyError, IndexError, TypeError):
            pass
        return False, None

    if kind is TargetKind.ATTRIBUTE_OBJECT and isinstance(segment, str):
        found = getattr(target, segment, None)
        return (found is not None), found

    return False, None


def data_get(target: Any, key: Any, default: Any = None) -> Any:
    """Get an item from an array or object using "dot" notation."""
    if key is None:
        return target

    for segment in segments(key):
        found, target = _step(target, segment)
        if not found:
            return value(default)

    return target


def data_has(target: Any, keys: Any) -> bool:
    """Check if an item or items exist using "dot" notation."""
    if keys is None:
        return False

    paths = keys if isinstance(keys, list) else [keys]
    if not paths:
        return False

    for path in paths:
        current = target
        for segment in segments(path):
            found, current = _step(current, segment)
            if not found:
                return False

    return True


def _promote(container: List[Any]) -> dict:
    """Turn a list into an index-keyed dict."""
    return dict(enumerate(container))


def _writable_key(container: Any, segment: Any) -> Tuple[bool, Any]:
    """Whether container can store segment as-is, and the key to use."""
    if isinstance(container, dict):
        found, key = resolve_key(container, segment)
        return True, key
    index = _int_key(segment)
    if index is not None and 0 <= index <= len(container):
        return True, index
    return False, segment


def _assign(container: Any, key: Any, item: Any) -> None:
    if isinstance(container, list) and key == len(container):
        container.append(item)
    else:
        container[key] = item


def data_set(target: Any, key: Any, item: Any, overwrite: bool = True) -> Any:
    """Set an item on an array or object using dot notation."""
    if key is None:
        return item

    parts = segments(key)
    root = target if is_accessible(target) else {}
    if root is not target:
        logger.debug("Replacing non-mapping target", {'type': type(target).__name__})

    parent: Any = None
    parent_key: Any = None
    current = root

    for position, segment in enumerate(parts):
        storable, actual = _writable_key(current, segment)
        if not storable:
            logger.debug("Promoting list to mapping", {'segment': segment, 'length': len(current)})
            current = _promote(current)
            if parent is None:
                root = current
            else:
                parent[parent_key] = current
            _, actual = _writable_key(current, segment)

        if position == len(parts) - 1:
            if overwrite or _existing(current, actual) is None:
                _assign(current, actual, item)
            break

        exists, _ = resolve_key(current, actual)
        if not exists or not is_accessible(current[actual]):
            if exists:
                logger.debug("Overwriting non-mapping value", {'segment': segment})
            _assign(current, actual, {})

        parent, parent_key = current, actual
        current = current[actual]

    return root


def _existing(container: Any, key: Any) -> Any:
    found, actual = resolve_key(container, key)
    return container[actual] if found else None


def data_forget(target: Any, keys: Any) -> Any:
    """Remove one or many items using "dot" notation."""
    if keys is None:
        return target

    paths = keys if isinstance(keys, list) else [keys]

    for path in paths:
        parts = segments(path)
        parent: Any = None
        parent_key: Any = None
        current = target

        for segment in parts[:-1]:
            if not is_accessible(current):
                break
            found, actual = resolve_key(current, segment)
            if not found:
                current = None
                break
            parent, parent_key = current, actual
            current = current[actual]

        if not is_accessible(current):
            continue

        found, actual = resolve_key(current, parts[-1])
        if not found:
            continue

        # Siblings keep their indices once an entry is removed
        if isinstance(current, list):
            logger.debug("Promoting list to mapping", {'segment': parts[-1], 'length': len(current)})
            current = _promote(current)
            if parent is None:
                target = current
            else:
                parent[parent_key] = current

        del current[actual]

    return target
