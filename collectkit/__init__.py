"""
collectkit

Ordered, keyed collections and dot-notation access to nested data.
"""

from __future__ import annotations

from collectkit.Support import (
    Arr,
    Collection,
    Deferred,
    collect,
    data_forget,
    data_get,
    data_has,
    data_set,
    value,
)

__version__ = "1.0.0"

__all__ = [
    'Arr',
    'Collection',
    'Deferred',
    'collect',
    'data_get',
    'data_set',
    'data_has',
    'data_forget',
    'value',
]
