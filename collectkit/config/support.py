"""Support Configuration

Defaults for the collection toolkit: JSON rendering, logging and the
random generator used for sampling. Every field can be overridden through a
``COLLECTKIT_<FIELD>`` environment variable.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = 'COLLECTKIT_'

_ENV_LITERALS: Dict[str, Any] = {
    'true': True,
    'false': False,
    'null': None,
    'none': None,
    '': None,
}


def parse_env_value(raw: str) -> Any:
    """Read an environment string as a bool, None, number, JSON document or text."""
    text = raw.strip()
    if text.lower() in _ENV_LITERALS:
        return _ENV_LITERALS[text.lower()]

    try:
        return float(text) if '.' in text else int(text)
    except ValueError:
        pass

    if text.startswith(('{', '[')):
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return raw
    return raw


class SupportSettings(BaseModel):
    """Collection toolkit settings with validation."""
    
    # JSON Serialization
    json_indent: Optional[int] = Field(
        default=None,
        description="Indentation used by to_json (None renders compactly)",
        ge=0,
        le=16
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort object keys when rendering JSON"
    )
    json_ensure_ascii: bool = Field(
        default=True,
        description="Escape non-ASCII characters when rendering JSON"
    )
    
    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Level of the default toolkit log handler"
    )
    
    # Sampling
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for Collection.random (None uses system entropy)"
    )
    
    model_config = ConfigDict(frozen=True)
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'Unsupported log level: {v}')
        return level
    
    def json_options(self) -> Dict[str, Any]:
        """Get the json.dumps keyword defaults."""
        return {
            'indent': self.json_indent,
            'sort_keys': self.json_sort_keys,
            'ensure_ascii': self.json_ensure_ascii,
        }


def load_settings(environ: Optional[Dict[str, str]] = None) -> SupportSettings:
    """Build settings from COLLECTKIT_* environment variables."""
    source = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    
    for name in SupportSettings.model_fields:
        raw = source.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        overrides[name] = parse_env_value(raw)
    
    return SupportSettings(**overrides)


@lru_cache(maxsize=1)
def get_settings() -> SupportSettings:
    """Get the process-wide settings instance."""
    return load_settings()
