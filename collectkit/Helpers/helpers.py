from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

T = TypeVar('T')


# Configuration Helpers
def config(key: Optional[str] = None, default: Any = None) -> Any:
    """Get configuration value."""
    from collectkit.Support.Config import config as get_config
    return get_config(key, default)


def env(key: str, default: Any = None) -> Any:
    """Get environment variable with type conversion."""
    from collectkit.Support.Config import env as get_env
    return get_env(key, default)


def logger(channel: Optional[str] = None) -> Any:
    """Get logger instance."""
    from collectkit.Utils.Logger import get_logger
    return get_logger(channel)


# Data Helpers
def data_get(target: Any, key: Any, default: Any = None) -> Any:
    """Get an item from an array or object using dot notation."""
    from collectkit.Support.Data import data_get as resolve
    return resolve(target, key, default)


def data_set(target: Any, key: Any, value: Any, overwrite: bool = True) -> Any:
    """Set an item on an array or object using dot notation."""
    from collectkit.Support.Data import data_set as assign
    return assign(target, key, value, overwrite)


def data_has(target: Any, key: Any) -> bool:
    """Check if an item exists in an array or object using dot notation."""
    from collectkit.Support.Data import data_has as exists
    return exists(target, key)


def data_forget(target: Any, key: Any) -> Any:
    """Remove an item from an array or object using dot notation."""
    from collectkit.Support.Data import data_forget as remove
    return remove(target, key)


def deferred(producer: Callable[[], T]) -> Any:
    """Wrap a producer so it runs only when a default is needed."""
    from collectkit.Support.Data import Deferred
    return Deferred(producer)


# Array Helpers
def array_get(array: Dict[Any, Any], key: str, default: Any = None) -> Any:
    """Get array item using dot notation."""
    from collectkit.Support.Arr import Arr
    return Arr.get(array, key, default)


def array_set(array: Dict[Any, Any], key: str, value: Any) -> Dict[Any, Any]:
    """Set array item using dot notation."""
    from collectkit.Support.Arr import Arr
    return Arr.set(array, key, value)


def array_has(array: Dict[Any, Any], key: Union[str, List[str]]) -> bool:
    """Check if array has key using dot notation."""
    from collectkit.Support.Arr import Arr
    return Arr.has(array, key)


def array_forget(array: Dict[Any, Any], key: Union[str, List[str]]) -> Dict[Any, Any]:
    """Remove array item using dot notation."""
    from collectkit.Support.Arr import Arr
    return Arr.forget(array, key)


def array_only(array: Dict[Any, Any], keys: Union[str, List[str]]) -> Dict[Any, Any]:
    """Get only specified keys from array."""
    from collectkit.Support.Arr import Arr
    return Arr.only(array, keys)


def array_except(array: Dict[Any, Any], keys: Union[str, List[str]]) -> Dict[Any, Any]:
    """Get all keys except specified from array."""
    from collectkit.Support.Arr import Arr
    return Arr.except_(array, keys)


def array_pluck(array: Any, key: str, index_key: Optional[str] = None) -> Dict[Any, Any]:
    """Pluck values from array of dictionaries."""
    from collectkit.Support.Arr import Arr
    return Arr.pluck(array, key, index_key)


def array_where(array: Any, callback: Callable[..., bool]) -> Dict[Any, Any]:
    """Filter array using a (key, value) callback."""
    from collectkit.Support.Arr import Arr
    return Arr.where(array, callback)


def array_flatten(array: Any, depth: Union[int, float] = float('inf')) -> List[Any]:
    """Flatten multidimensional array."""
    from collectkit.Support.Arr import Arr
    return Arr.flatten(array, depth)


def array_wrap(value: Any) -> List[Any]:
    """Wrap value in array if not already an array."""
    from collectkit.Support.Arr import Arr
    return Arr.wrap(value)


# Collection Helpers
def collect(items: Any = None) -> Any:
    """Create collection instance."""
    from collectkit.Support.Collection import Collection
    return Collection(items)


# Utility Helpers
def value(value: Any) -> Any:
    """Return value, running it first if it is deferred."""
    from collectkit.Support.Data import value as resolve
    return resolve(value)


def tap(value: T, callback: Callable[[T], Any]) -> T:
    """Tap into a value."""
    callback(value)
    return value


def filled(value: Any) -> bool:
    """Check if value is filled."""
    from collectkit.Support.Collection import Collection

    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    if isinstance(value, (list, dict, Collection)):
        return len(value) > 0
    return True


def blank(value: Any) -> bool:
    """Check if value is blank."""
    return not filled(value)
