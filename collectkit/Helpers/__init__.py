from __future__ import annotations

from .helpers import *

__all__ = [
    # Configuration helpers
    'config', 'env', 'logger',

    # Data helpers
    'data_get', 'data_set', 'data_has', 'data_forget', 'deferred',

    # Array helpers
    'array_get', 'array_set', 'array_has', 'array_forget', 'array_only',
    'array_except', 'array_pluck', 'array_where', 'array_flatten', 'array_wrap',

    # Collection helpers
    'collect',

    # Utility helpers
    'value', 'tap', 'filled', 'blank',
]
