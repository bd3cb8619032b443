from __future__ import annotations

from .Arrayable import Arrayable
from .Jsonable import Jsonable
from .IndexAccessible import IndexAccessible

__all__: list[str] = [
    'Arrayable',
    'Jsonable',
    'IndexAccessible',
]
