from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable


@runtime_checkable
class Arrayable(Protocol):
    """Protocol for objects that can be converted to an ordered mapping."""
    
    def to_array(self) -> Union[Mapping[Any, Any], Sequence[Any]]:
        """Get the instance as an ordered mapping."""
        ...
