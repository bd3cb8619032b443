from __future__ import annotations

import json
import random as random_module
from functools import cmp_to_key, reduce
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, Union

from collectkit.Support.Arr import Arr
from collectkit.Support.Callbacks import call_with_key
from collectkit.Support.Comparison import (
    OPERATORS,
    compare,
    is_number,
    is_numeric,
    loose_equals,
    operator_for,
    strict_equals,
    to_number,
)
from collectkit.Support.Config import config
from collectkit.Support.Data import TargetKind, data_get, resolve_key, target_kind, value
from collectkit.Support.Exceptions import InvalidOperatorException, OutOfRangeException
from collectkit.Support.Json import serialize
from collectkit.Support.Normalizer import get_arrayable_items, normalize_key
from collectkit.Support.Types import MISSING, Key, OrderedMapping, T, is_accessible, is_arrayable, is_jsonable
from collectkit.Utils.Logger import get_logger

logger = get_logger(__name__)

Selector = Union[str, List[str], Callable[..., Any], None]


class Collection(Generic[T]):
    """Ordered, keyed collection of items."""

    def __init__(self, items: Any = None):
        self._items: OrderedMapping = get_arrayable_items(items)

    @classmethod
    def make(cls, items: Any = None) -> 'Collection[T]':
        """Create a new collection instance."""
        return cls(items)

    # Core methods
    def all(self) -> OrderedMapping:
        """Get all items keyed as stored."""
        return dict(self._items)

    def to_list(self) -> List[T]:
        """Get the item values as a list."""
        return list(self._items.values())

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._items) == 0

    def is_not_empty(self) -> bool:
        """Check if the collection is not empty."""
        return not self.is_empty()

    # Key access
    def get(self, key: Key, default: Any = None) -> Any:
        """Get an item by key."""
        found, actual = resolve_key(self._items, key)
        return self._items[actual] if found else value(default)

    def has(self, *keys: Any) -> bool:
        """Check if every given key exists."""
        return all(resolve_key(self._items, key)[0] for key in _key_list(keys))

    def put(self, key: Optional[Key], item: T) -> 'Collection[T]':
        """Put an item in the collection by key."""
        if key is None:
            return self.push(item)
        _, actual = resolve_key(self._items, key)
        self._items[actual] = item
        return self

    def push(self, *items: T) -> 'Collection[T]':
        """Add items to the end of the collection."""
        for item in items:
            self._items[self._next_index()] = item
        return self

    def forget(self, *keys: Any) -> 'Collection[T]':
        """Remove items by key."""
        for key in _key_list(keys):
            found, actual = resolve_key(self._items, key)
            if found:
                del self._items[actual]
        return self

    def pull(self, key: Key, default: Any = None) -> Any:
        """Get an item by key and remove it."""
        item = self.get(key, default)
        self.forget(key)
        return item

    def pop(self) -> Optional[T]:
        """Remove and return the last item."""
        if not self._items:
            return None
        return self._items.popitem()[1]

    def shift(self) -> Optional[T]:
        """Remove and return the first item, renumbering integer keys."""
        if not self._items:
            return None
        first_key = next(iter(self._items))
        item = self._items.pop(first_key)
        self._items = Arr.slice(self._items, 0)
        return item

    def prepend(self, item: T, key: Optional[Key] = None) -> 'Collection[T]':
        """Get a new collection with an item at the beginning."""
        return Collection(Arr.prepend(self._items, item, key))

    def splice(self, offset: int, length: Optional[int] = None, replacement: Any = None) -> 'Collection[T]':
        """Remove a slice of items in place, returning the removed items."""
        return Collection(Arr.splice(self._items, offset, length, replacement))

    # Filtering and searching
    def filter(self, callback: Optional[Callable[..., bool]] = None) -> 'Collection[T]':
        """Filter items by a callback, or by truthiness without one."""
        if callback is None:
            return Collection({k: v for k, v in self._items.items() if v})
        return Collection({k: v for k, v in self._items.items() if call_with_key(callback, v, k)})

    def reject(self, callback: Any) -> 'Collection[T]':
        """Remove items matching a callback or equal to a value."""
        if callable(callback):
            return Collection({k: v for k, v in self._items.items() if not call_with_key(callback, v, k)})
        return Collection({k: v for k, v in self._items.items() if not loose_equals(v, callback)})

    def where(self, key: Any, operator: Any, value: Any = MISSING) -> 'Collection[T]':
        """Filter items by a key-value pair using strict comparison."""
        predicate = self._operator_for_where(key, operator, value, strict=True)
        return Collection({k: v for k, v in self._items.items() if predicate(v)})

    def where_loose(self, key: Any, operator: Any, value: Any = MISSING) -> 'Collection[T]':
        """Filter items by a key-value pair using loose comparison."""
        predicate = self._operator_for_where(key, operator, value, strict=False)
        return Collection({k: v for k, v in self._items.items() if predicate(v)})

    def first(self, callback: Optional[Callable[..., bool]] = None, default: Any = None) -> Any:
        """Get the first item passing a truth test."""
        return Arr.first(self._items, callback, default)

    def last(self, callback: Optional[Callable[..., bool]] = None, default: Any = None) -> Any:
        """Get the last item passing a truth test."""
        return Arr.last(self._items, callback, default)

    def contains(self, key: Any, operator: Any = MISSING, value: Any = MISSING) -> bool:
        """Determine if an item exists in the collection."""
        if operator is MISSING:
            if callable(key):
                return any(call_with_key(key, v, k) for k, v in self._items.items())
            return any(loose_equals(v, key) for v in self._items.values())

        predicate = self._operator_for_where(key, operator, value, strict=False)
        return any(predicate(v) for v in self._items.values())

    def search(self, needle: Any, strict: bool = False) -> Optional[Key]:
        """Get the key of the first matching item, or None."""
        if callable(needle):
            for key, item in self._items.items():
                if call_with_key(needle, item, key):
                    return key
            return None

        equals = strict_equals if strict else loose_equals
        for key, item in self._items.items():
            if equals(item, needle):
                return key
        return None

    # Keys and values
    def values(self) -> 'Collection[T]':
        """Reset the keys to consecutive integers."""
        return Collection(self.to_list())

    def keys(self) -> 'Collection[Key]':
        """Get the keys of the items."""
        return Collection(list(self._items.keys()))

    def flip(self) -> 'Collection[Key]':
        """Swap keys with their values."""
        return Collection({normalize_key(v): k for k, v in self._items.items()})

    def except_(self, *keys: Any) -> 'Collection[T]':
        """Get all items except those with the given keys."""
        return Collection(Arr.except_(self._items, _key_list(keys)))

    def only(self, *keys: Any) -> 'Collection[T]':
        """Get the items with the given keys."""
        wanted = _key_list(keys)
        if not wanted:
            return Collection(self._items)
        return Collection(Arr.only(self._items, wanted))

    def pluck(self, item_value: Any, key: Any = None) -> 'Collection[Any]':
        """Get the values of a given key."""
        return Collection(Arr.pluck(self._items, item_value, key))

    def key_by(self, key: Selector) -> 'Collection[T]':
        """Key the collection by a field or callback."""
        retriever = self._value_retriever(key)
        return Collection({
            normalize_key(call_with_key(retriever, item, k)): item
            for k, item in self._items.items()
        })

    # Transforming
    def map(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Run a callback over each item, keeping keys."""
        return Collection({k: call_with_key(callback, v, k) for k, v in self._items.items()})

    def flat_map(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Map each item and collapse the results by one level."""
        return self.map(callback).collapse()

    def transform(self, callback: Callable[..., Any]) -> 'Collection[Any]':
        """Transform each item in place using a callback."""
        self._items = self.map(callback).all()
        return self

    def each(self, callback: Callable[..., Any]) -> 'Collection[T]':
        """Execute a callback over each item until it returns False."""
        for key, item in list(self._items.items()):
            if call_with_key(callback, item, key) is False:
                break
        return self

    def reduce(self, callback: Callable[[Any, T], Any], initial: Any = None) -> Any:
        """Reduce the collection to a single value."""
        return reduce(callback, self._items.values(), initial)

    def flatten(self, depth: Union[int, float] = float('inf')) -> 'Collection[Any]':
        """Flatten nested items into a single level."""
        return Collection(Arr.flatten(self._items, depth))

    def collapse(self) -> 'Collection[Any]':
        """Collapse nested items by one level."""
        return Collection(Arr.collapse(self._items))

    def merge(self, items: Any) -> 'Collection[T]':
        """Merge items: string keys overwrite, integer keys append."""
        return Collection(Arr.merge(self._items, get_arrayable_items(items)))

    def zip(self, *others: Any) -> 'Collection[Collection[Any]]':
        """Zip the items with the given arrays by position."""
        arrays = [list(get_arrayable_items(other).values()) for other in others]
        rows = []
        for index, item in enumerate(self._items.values()):
            row = [item] + [array[index] if index < len(array) else None for array in arrays]
            rows.append(Collection(row))
        return Collection(rows)

    # Grouping and partitioning
    def group_by(self, key: Selector) -> 'Collection[Collection[T]]':
        """Group items by a field or callback, keeping item keys."""
        retriever = self._value_retriever(key)
        groups: Dict[Key, OrderedMapping] = {}

        for k, item in self._items.items():
            group_key = normalize_key(call_with_key(retriever, item, k))
            groups.setdefault(group_key, {})[k] = item

        return Collection({group_key: Collection(group) for group_key, group in groups.items()})

    def chunk(self, size: int) -> 'Collection[Collection[T]]':
        """Break the collection into chunks of the given size."""
        if size <= 0:
            return Collection()

        pairs = list(self._items.items())
        return Collection([Collection(dict(pairs[i:i + size])) for i in range(0, len(pairs), size)])

    def every(self, step: int, offset: int = 0) -> 'Collection[T]':
        """Get every n-th item starting at offset."""
        if step < 1:
            raise ValueError("Step must be a positive integer")
        return Collection(self.to_list()[offset::step])

    def for_page(self, page: int, per_page: int) -> 'Collection[T]':
        """Get the items of a given page."""
        return Collection(Arr.slice(self._items, max(0, (page - 1) * per_page), per_page))

    def take(self, limit: int) -> 'Collection[T]':
        """Take the first or last items."""
        if limit < 0:
            return Collection(Arr.slice(self._items, limit))
        return Collection(Arr.slice(self._items, 0, limit))

    # Set operations
    def unique(self, key: Selector = None) -> 'Collection[T]':
        """Get unique items, keeping the first occurrence."""
        retriever = None if key is None else self._value_retriever(key)
        seen: List[Any] = []
        result: OrderedMapping = {}

        for k, item in self._items.items():
            identity = item if retriever is None else call_with_key(retriever, item, k)
            if any(strict_equals(identity, previous) for previous in seen):
                continue
            seen.append(identity)
            result[k] = item

        return Collection(result)

    def diff(self, items: Any) -> 'Collection[T]':
        """Get the items not present in the given items."""
        others = list(get_arrayable_items(items).values())
        return Collection({
            k: v for k, v in self._items.items()
            if not any(strict_equals(v, other) for other in others)
        })

    def intersect(self, items: Any) -> 'Collection[T]':
        """Get the items present in the given items."""
        others = list(get_arrayable_items(items).values())
        return Collection({
            k: v for k, v in self._items.items()
            if any(strict_equals(v, other) for other in others)
        })

    # Sorting
    def sort(self, comparator: Optional[Callable[[Any, Any], int]] = None) -> 'Collection[T]':
        """Sort items by value, keeping keys."""
        return Collection(Arr.sort(self._items, comparator))

    def sort_by(self, selector: Selector, descending: bool = False) -> 'Collection[T]':
        """Sort items by a field or callback, keeping keys."""
        retriever = self._value_retriever(selector)
        direction = -1 if descending else 1
        decorated = [(call_with_key(retriever, item, k), k, item) for k, item in self._items.items()]
        decorated.sort(key=cmp_to_key(lambda a, b: direction * compare(a[0], b[0])))
        return Collection({k: item for _, k, item in decorated})

    def sort_by_desc(self, selector: Selector) -> 'Collection[T]':
        """Sort items in descending order by a field or callback."""
        return self.sort_by(selector, descending=True)

    def reverse(self) -> 'Collection[T]':
        """Reverse the item order, keeping keys."""
        return Collection(dict(reversed(self._items.items())))

    def random(self, amount: Optional[int] = None) -> Any:
        """Get one or a given number of items at random."""
        available = len(self._items)
        requested = 1 if amount is None else amount

        if requested > available or available == 0:
            logger.warning("Random sample larger than collection", {'requested': requested, 'available': available})
            raise OutOfRangeException(requested, available)

        generator = _random_generator()
        if amount is None:
            return generator.choice(self.to_list())

        positions = sorted(generator.sample(range(available), amount))
        pairs = list(self._items.items())
        return Collection(dict(pairs[position] for position in positions))

    # Aggregating
    def sum(self, key: Selector = None) -> Union[int, float]:
        """Sum the items or a field of the items."""
        return sum(self._numbers(key))

    def avg(self, key: Selector = None) -> Optional[float]:
        """Get the average of the items or a field of the items."""
        present = [v for v in self._projections(key) if v is not None]
        if not present:
            return None
        return float(sum(self._numbers(key)) / len(present))

    def min(self, key: Selector = None) -> Any:
        """Get the minimum of the items or a field of the items."""
        present = [v for v in self._projections(key) if v is not None]
        if not present:
            return None
        return reduce(lambda best, current: current if compare(current, best) < 0 else best, present)

    def max(self, key: Selector = None) -> Any:
        """Get the maximum of the items or a field of the items."""
        present = [v for v in self._projections(key) if v is not None]
        if not present:
            return None
        return reduce(lambda best, current: current if compare(current, best) > 0 else best, present)

    # Joining
    def implode(self, item_value: Any, glue: str = '') -> str:
        """Join items, or a field of the items, into a string."""
        first = self.first()
        if is_accessible(first) or target_kind(first) in (TargetKind.INDEX_ACCESSIBLE, TargetKind.ATTRIBUTE_OBJECT):
            return glue.join(str(v) for v in self.pluck(item_value).to_list())
        return str(item_value).join(str(v) for v in self._items.values())

    # Serialization
    def to_array(self) -> OrderedMapping:
        """Get the items with nested arrayables and jsonables converted."""
        return {k: _convert_item(v) for k, v in self._items.items()}

    def to_json(self, **options: Any) -> str:
        """Get the items as JSON."""
        merged = {**config('json', {}), **options}
        return serialize(self.to_array(), **merged)

    # Magic methods
    def __iter__(self) -> Iterator[T]:
        """Iterate over item values."""
        return iter(self._items.values())

    def __len__(self) -> int:
        """Get length."""
        return len(self._items)

    def __getitem__(self, key: Key) -> T:
        """Get item by key."""
        found, actual = resolve_key(self._items, key)
        if not found:
            raise KeyError(key)
        return self._items[actual]

    def __setitem__(self, key: Optional[Key], item: T) -> None:
        """Set item by key, appending when the key is None."""
        self.put(key, item)

    def __delitem__(self, key: Key) -> None:
        """Remove item by key."""
        self.forget(key)

    def __contains__(self, key: Any) -> bool:
        """Check if a key exists."""
        return resolve_key(self._items, key)[0]

    def __bool__(self) -> bool:
        """Check if collection is not empty."""
        return not self.is_empty()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (Collection, dict, list, tuple)) or is_arrayable(other):
            return _plain(self) == _plain(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """String representation."""
        return f"Collection({self._items})"

    # Helper methods
    def _next_index(self) -> int:
        """Get the integer key used when appending."""
        indexes = [k for k in self._items if isinstance(k, int)]
        return max(indexes) + 1 if indexes else 0

    def _value_retriever(self, selector: Selector) -> Callable[..., Any]:
        """Get a callback that reads a field from an item."""
        if callable(selector):
            return selector
        return lambda item: data_get(item, selector)

    def _projections(self, key: Selector) -> List[Any]:
        if key is None:
            return self.to_list()
        retriever = self._value_retriever(key)
        return [call_with_key(retriever, v, k) for k, v in self._items.items()]

    def _numbers(self, key: Selector) -> List[Union[int, float]]:
        numbers: List[Union[int, float]] = []
        for item in self._projections(key):
            if is_number(item) or isinstance(item, bool):
                numbers.append(item)
            elif is_numeric(item):
                numbers.append(to_number(item))
        return numbers

    def _operator_for_where(self, key: Any, operator: Any, expected: Any, strict: bool) -> Callable[[Any], bool]:
        """Build the item predicate for a where clause."""
        if expected is MISSING:
            operator, expected = '=', operator

        if not isinstance(operator, str) or operator_for(operator, strict) is None:
            raise InvalidOperatorException(operator, OPERATORS)

        check = operator_for(operator, strict)
        return lambda item: check(data_get(item, key), expected)


def _key_list(keys: Tuple[Any, ...]) -> List[Any]:
    """Accept keys as varargs or as a single list."""
    if len(keys) == 1 and isinstance(keys[0], (list, tuple, Collection)):
        return list(keys[0])
    return list(keys)


def _plain(item: Any) -> Any:
    """Reduce nested collections, arrayables and sequences to plain dicts."""
    if isinstance(item, Collection):
        return {k: _plain(v) for k, v in item.all().items()}
    if is_arrayable(item):
        return _plain(get_arrayable_items(item))
    if isinstance(item, dict):
        return {normalize_key(k): _plain(v) for k, v in item.items()}
    if isinstance(item, (list, tuple)):
        return {i: _plain(v) for i, v in enumerate(item)}
    return item


def _convert_item(item: Any) -> Any:
    """Convert an item through to_array, or by decoding its to_json text."""
    if is_arrayable(item):
        return item.to_array()
    if is_jsonable(item):
        return json.loads(item.to_json())
    return item


def _random_generator() -> Any:
    """Get the generator used for sampling, seeded from configuration."""
    seed = config('random.seed')
    if seed is None:
        return random_module
    return random_module.Random(seed)


def collect(items: Any = None) -> Collection[Any]:
    """Create a collection instance."""
    return Collection.make(items)
