from __future__ import annotations

from urllib.parse import quote


def build_share_url(base_url: str, code: str) -> str:
    """Return the public page URL for a position code."""
    if not code:
        return f"{base_url}/p"
    return f"{base_url}/p/{quote(code, safe='')}"
