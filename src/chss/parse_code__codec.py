"""Decode position codes into positions."""

from __future__ import annotations

from pydantic import ValidationError

from chss.decode_board__codec import decode_board
from chss.define_codec_constants__const import FULL_BOARD_PREFIX, PREFIX_LENGTH, SHORT_KEY_PREFIX
from chss.errors import ChssError
from chss.models.position import Position, validate_board_layout
from chss.move_engine import MoveEngine
from chss.record_discovery__codec import record_discovery
from chss.utils.logger import get_logger

logger = get_logger(__name__)


def _replay_code(move_history: str, engine: MoveEngine) -> Position:
    position = engine.replay(move_history)
    if position.short_key is not None:
        return position
    if not record_discovery(engine.cache, position.board, position.move_history):
        return position
    return position.model_copy(update={"short_key": engine.lookup_short_key(position.board)})


def _resolve_short_key(payload: str, engine: MoveEngine) -> Position:
    board = engine.dictionary.lookup_by_key(payload)
    if board is None:
        return _replay_code(payload, engine)
    return Position(
        board=board,
        move_history=engine.dictionary.line_for_key(payload),
        short_key=payload,
    )


def _resolve_full_board(payload: str, engine: MoveEngine) -> Position:
    decoded = decode_board(payload)
    validate_board_layout(decoded)
    board = engine.rules.normalize(decoded)
    return Position(board=board)


def parse_code(token: str | None, engine: MoveEngine) -> Position:
    """Decode a position code; malformed codes resolve to the starting position.

    Resolution order: empty code, ``u-`` dictionary key, ``u-`` raw move history,
    ``f-`` base64 board, and finally the whole code as a raw move history.
    """
    code = (token or "").strip()
    if not code:
        return Position.starting()
    prefix, payload = code[:PREFIX_LENGTH], code[PREFIX_LENGTH:]
    try:
        if prefix == SHORT_KEY_PREFIX:
            return _resolve_short_key(payload, engine)
        if prefix == FULL_BOARD_PREFIX:
            return _resolve_full_board(payload, engine)
        return _replay_code(code, engine)
    except (ChssError, ValidationError, ValueError) as exc:
        logger.debug("Falling back to the starting position for code %r: %s", code, exc)
        return Position.starting()
