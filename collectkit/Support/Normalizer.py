from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from collectkit.Support.Types import TEXT_TYPES, Key, OrderedMapping, is_arrayable, is_jsonable
from collectkit.Utils.Logger import get_logger

logger = get_logger(__name__)


def normalize_key(key: Any) -> Key:
    """Coerce a computed value into a usable mapping key."""
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, (int, str)):
        return key
    if isinstance(key, float):
        return int(key)
    if key is None:
        return ''
    return str(key)


def _shape(value: Any) -> OrderedMapping:
    """Re-shape a mapping or sequence into an ordered mapping."""
    if isinstance(value, Mapping):
        return {normalize_key(k): v for k, v in value.items()}
    if isinstance(value, Iterable) and not isinstance(value, TEXT_TYPES):
        return dict(enumerate(value))
    return {0: value}


def get_arrayable_items(items: Any) -> OrderedMapping:
    """Results array of items from Collection or Arrayable."""
    from collectkit.Support.Collection import Collection

    if items is None:
        return {}
    if isinstance(items, Collection):
        return items.all()
    if is_arrayable(items):
        return _shape(items.to_array())
    if is_jsonable(items):
        text = items.to_json()
        logger.debug("Decoding jsonable items", {'type': type(items).__name__, 'length': len(text)})
        return _shape(json.loads(text))
    if isinstance(items, (Mapping, list, tuple)):
        return _shape(items)
    if isinstance(items, Iterable) and not isinstance(items, TEXT_TYPES):
        return _shape(items)
    return {0: items}


to_ordered_mapping = get_arrayable_items
