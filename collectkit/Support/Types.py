"""
Shared type definitions for the support layer.

- Type variables and key aliases
- The ordered mapping representation
- Capability type guards
- The MISSING sentinel for optional positional arguments
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Final, List, TypeGuard, TypeVar, Union

from collectkit.Contracts import Arrayable, IndexAccessible, Jsonable

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Key = Union[int, str]
OrderedMapping = Dict[Key, Any]
Path = Union[Key, List[str], None]
KeyOrCallback = Union[str, Callable[..., Any], None]

TEXT_TYPES: Final = (str, bytes, bytearray)
SCALAR_TYPES: Final = (str, bytes, bytearray, int, float, complex, bool, type(None))


class _Missing:
    """Marker for arguments that were not supplied."""
    
    _instance: "_Missing | None" = None
    
    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __repr__(self) -> str:
        return "MISSING"
    
    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def is_accessible(obj: Any) -> TypeGuard[Union[Dict[Any, Any], List[Any]]]:
    """Check if value is a mapping-like container (dict or list)."""
    return isinstance(obj, (dict, list))


def is_arrayable(obj: Any) -> TypeGuard[Arrayable]:
    """Check if object exposes to_array()."""
    return not isinstance(obj, type) and isinstance(obj, Arrayable)


def is_jsonable(obj: Any) -> TypeGuard[Jsonable]:
    """Check if object exposes to_json()."""
    return not isinstance(obj, type) and isinstance(obj, Jsonable)


def is_index_accessible(obj: Any) -> TypeGuard[IndexAccessible]:
    """Check if object supports keyed lookup with existence checks."""
    if isinstance(obj, SCALAR_TYPES) or isinstance(obj, type):
        return False
    return isinstance(obj, IndexAccessible)
