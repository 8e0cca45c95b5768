"""CHSS package entrypoints."""

from chss.codec import CanonicalCode, PositionCodec, build_codec, get_codec
from chss.config import Settings, get_settings
from chss.discovery_cache import DiscoveryCache
from chss.models import GameOutcome, GameStatus, MoveResult, Position
from chss.move_engine import MoveEngine
from chss.position_dictionary import PositionDictionary


def main() -> None:
    """Serve the position-code API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("chss.api:app", host=settings.host, port=settings.port)


__all__ = [
    "CanonicalCode",
    "DiscoveryCache",
    "GameOutcome",
    "GameStatus",
    "MoveEngine",
    "MoveResult",
    "Position",
    "PositionCodec",
    "PositionDictionary",
    "Settings",
    "build_codec",
    "get_codec",
    "get_settings",
    "main",
]
