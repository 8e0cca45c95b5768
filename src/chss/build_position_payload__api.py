from __future__ import annotations

from chss.build_share_url__api import build_share_url
from chss.codec import PositionCodec
from chss.config import Settings
from chss.models.position import Position
from chss.share_metadata import build_share_title, resolve_perspective


def build_position_payload(
    codec: PositionCodec,
    settings: Settings,
    position: Position,
    code: str,
    token: str | None = None,
    requested_perspective: str | None = None,
) -> dict[str, object]:
    """Serialize a position with its canonical code and display metadata."""
    perspective = resolve_perspective(
        code if token is None else token,
        position,
        requested_perspective,
    )
    return {
        "position": position.model_dump(mode="json"),
        "code": code,
        "url": build_share_url(settings.public_base_url, code),
        "title": build_share_title(position),
        "perspective": perspective.value,
        "status": codec.classify(position).model_dump(mode="json"),
    }
