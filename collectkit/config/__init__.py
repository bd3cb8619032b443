from __future__ import annotations

from .support import SupportSettings, get_settings, load_settings, parse_env_value

__all__ = [
    'SupportSettings',
    'load_settings',
    'get_settings',
    'parse_env_value',
]
