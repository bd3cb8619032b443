from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IndexAccessible(Protocol):
    """Protocol for objects offering keyed lookup and key existence checks."""
    
    def __getitem__(self, key: Any) -> Any:
        ...
    
    def __contains__(self, key: Any) -> bool:
        ...
