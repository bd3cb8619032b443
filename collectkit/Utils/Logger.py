from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

from collectkit.config.support import get_settings

LogContext = Dict[str, Any]

ROOT_LOGGER = 'collectkit'


class SupportLogger:
    """Channel-style logger used across the toolkit."""
    
    def __init__(self, name: str = ROOT_LOGGER) -> None:
        self.name = name
        self.logger = logging.getLogger(name)
        
        root = logging.getLogger(ROOT_LOGGER)
        if not root.handlers:
            self._setup_default_handler(root)
    
    def _setup_default_handler(self, root: logging.Logger) -> None:
        """Set up default logging handler."""
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(get_settings().log_level)
    
    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log debug message."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, context))
    
    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, context))
    
    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, context))
    
    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, context))
    
    def critical(self, message: str, context: Optional[LogContext] = None) -> None:
        """Log critical message."""
        self.logger.critical(self._format_message(message, context))
    
    def _format_message(self, message: str, context: Optional[LogContext] = None) -> str:
        """Format message with context."""
        if context:
            context_str = " | ".join(f"{k}={v}" for k, v in context.items())
            return f"{message} | {context_str}"
        return message


def get_logger(name: Optional[str] = None) -> SupportLogger:
    """Get a toolkit logger instance."""
    if name is None:
        name = ROOT_LOGGER
    return SupportLogger(name)
