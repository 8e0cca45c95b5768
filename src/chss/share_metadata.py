"""Titles and board orientation for shared position links."""

from __future__ import annotations

from chss.chess_side import ChessSide
from chss.define_codec_constants__const import MOVE_TOKEN_PATTERN
from chss.models.position import Position


def parse_url_segment(segment: str | list[str] | tuple[str, ...] | None) -> str:
    """Join a catch-all route segment back into a single code."""
    if isinstance(segment, str):
        return segment
    if isinstance(segment, (list, tuple)):
        return "/".join(segment)
    return ""


def last_move_destination(position: Position) -> str | None:
    """Destination square of the last move in the position's history, if known."""
    moves = MOVE_TOKEN_PATTERN.findall(position.move_history or "")
    if not moves:
        return None
    return moves[-1][1]


def build_share_title(position: Position) -> str:
    """Title such as ``"White moved to e4, Black to move"``."""
    side = position.side_to_move
    destination = last_move_destination(position)
    if destination is None:
        return f"{side.label} to move"
    return f"{side.opponent().label} moved to {destination}, {side.label} to move"


def resolve_perspective(token: str | None, position: Position, requested: str | None = None) -> ChessSide:
    """Board orientation: an explicit request, white for the empty code, else the side to move."""
    if requested in (ChessSide.WHITE.value, ChessSide.BLACK.value):
        return ChessSide(requested)
    if not token:
        return ChessSide.WHITE
    return position.side_to_move
