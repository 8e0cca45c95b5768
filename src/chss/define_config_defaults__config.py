from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

_MISSING = object()

DEFAULT_DISCOVERY_CACHE_CAPACITY = 4096
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PUBLIC_BASE_URL = "https://chss.chat"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
