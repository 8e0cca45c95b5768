"""Define top-level application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

from chss.build_position_dictionary__dictionary import DEFAULT_DICTIONARY_PATH
from chss.define_config_defaults__config import (
    DEFAULT_DISCOVERY_CACHE_CAPACITY,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_PUBLIC_BASE_URL,
)
from chss.raise_on_unexpected_kwargs__config import _raise_on_unexpected_kwargs
from chss.resolve_field_value__config import _field_value
from chss.utils.to_int import to_int


def _read_positive_int(name: str, default: int) -> int:
    value = to_int(os.getenv(name))
    if value is None or value < 1:
        return default
    return value


def _read_dictionary_path() -> Path:
    value = os.getenv("CHSS_DICTIONARY_PATH")
    return Path(value) if value else DEFAULT_DICTIONARY_PATH


@dataclass(slots=True, init=False)
class Settings:
    """Central configuration for the position-code service."""

    discovery_cache_capacity: int = field(
        default_factory=lambda: _read_positive_int(
            "CHSS_DISCOVERY_CACHE_CAPACITY", DEFAULT_DISCOVERY_CACHE_CAPACITY
        )
    )
    dictionary_path: Path = field(default_factory=_read_dictionary_path)
    log_level: str = field(
        default_factory=lambda: os.getenv("CHSS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    )
    public_base_url: str = field(
        default_factory=lambda: os.getenv("CHSS_PUBLIC_BASE_URL", DEFAULT_PUBLIC_BASE_URL)
    )
    host: str = field(default_factory=lambda: os.getenv("CHSS_HOST", DEFAULT_HOST))
    port: int = field(default_factory=lambda: _read_positive_int("CHSS_PORT", DEFAULT_PORT))

    def __init__(self, **kwargs: object) -> None:
        for field_info in fields(self):
            name = field_info.name
            setattr(self, name, _field_value(name, field_info, kwargs))
        _raise_on_unexpected_kwargs(kwargs)
        if self.discovery_cache_capacity < 1:
            raise ValueError("discovery_cache_capacity must be positive")
        self.public_base_url = self.public_base_url.rstrip("/")
