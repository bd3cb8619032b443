from __future__ import annotations

import os
from typing import Any, Dict, Optional

from collectkit.Support.Arr import Arr
from collectkit.config.support import SupportSettings, get_settings, parse_env_value


class ConfigRepository:
    """Configuration repository with dot notation access."""

    def __init__(self, settings: Optional[SupportSettings] = None) -> None:
        self._config: Dict[str, Any] = {}
        self._load_config(settings or get_settings())

    def _load_config(self, settings: SupportSettings) -> None:
        """Seed the repository from the settings model."""
        self._config = {
            'json': settings.json_options(),
            'logging': {'level': settings.log_level},
            'random': {'seed': settings.random_seed},
        }

    def get(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Get a configuration value using dot notation."""
        return Arr.get(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation."""
        Arr.set(self._config, key, value)

    def has(self, key: str) -> bool:
        """Check if a configuration key exists."""
        return Arr.has(self._config, key)

    def all(self) -> Dict[str, Any]:
        """Get all configuration."""
        return self._config.copy()

    def forget(self, key: str) -> None:
        """Remove a configuration value."""
        Arr.forget(self._config, key)

    def reload(self, settings: Optional[SupportSettings] = None) -> None:
        """Reload configuration from settings."""
        self._load_config(settings or get_settings())


config_repository = ConfigRepository()


def config(key: Optional[str] = None, default: Any = None) -> Any:
    """Get a configuration value, or the whole configuration without a key."""
    if key is None:
        return config_repository.all()
    return config_repository.get(key, default)


def env(key: str, default: Any = None) -> Any:
    """Get environment variable with type conversion."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return parse_env_value(raw)
