from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Jsonable(Protocol):
    """Protocol for objects that can be converted to JSON."""
    
    def to_json(self, **options: Any) -> str:
        """Convert the object to its JSON representation."""
        ...
