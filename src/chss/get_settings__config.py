"""Load settings with environment overrides."""

from __future__ import annotations

import importlib

from chss.define_settings__config import Settings


def get_settings(**overrides: object) -> Settings:
    """Return a fresh Settings instance, re-reading ``.env`` first."""
    config_module = importlib.import_module("chss.config")
    config_module.load_dotenv()
    return Settings(**overrides)
