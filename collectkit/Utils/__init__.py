from __future__ import annotations

from .Logger import SupportLogger, get_logger

__all__ = [
    'SupportLogger',
    'get_logger',
]
