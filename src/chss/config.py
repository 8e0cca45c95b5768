from __future__ import annotations

from dotenv import load_dotenv

from chss.define_settings__config import Settings
from chss.get_settings__config import get_settings

__all__ = ["Settings", "get_settings", "load_dotenv"]
