"""Produce the canonical code for a position."""

from __future__ import annotations

from chss.define_codec_constants__const import FULL_BOARD_PREFIX, SHORT_KEY_PREFIX
from chss.encode_board__codec import encode_board
from chss.models.position import Position
from chss.move_engine import MoveEngine
from chss.record_discovery__codec import record_discovery


def generate_code(position: Position, engine: MoveEngine) -> str:
    """Return the preferred code for a position.

    The order mirrors ``parse_code``: the starting board is the empty code, then the
    position's own short key, a dictionary key, a discovered key, and finally the
    ``f-`` base64 board which can encode any position.
    """
    if position.is_starting:
        return ""
    if position.short_key:
        return f"{SHORT_KEY_PREFIX}{position.short_key}"
    key = engine.dictionary.lookup_by_board(position.board)
    if key is None:
        record_discovery(engine.cache, position.board, position.move_history)
        key = engine.cache.get(position.board)
    if key is not None:
        return f"{SHORT_KEY_PREFIX}{key}"
    return f"{FULL_BOARD_PREFIX}{encode_board(position.board)}"
