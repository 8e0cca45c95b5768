"""Split move-history strings into move tokens and replay them from the start."""

from __future__ import annotations

from chss.define_codec_constants__const import (
    MOVE_HISTORY_PATTERN,
    MOVE_TOKEN_PATTERN,
    STARTING_BOARD,
)
from chss.errors import IllegalMoveError, MalformedCodeError
from chss.models.position import Position
from chss.ports.rules_engine import RulesEngine

MoveTuple = tuple[str, str, str | None]


def format_move_token(from_square: str, to_square: str, promotion: str | None = None) -> str:
    """Return the fixed-width token for a move, e.g. ``e7e8q``."""
    return f"{from_square}{to_square}{(promotion or '').lower()}"


def split_move_history(move_history: str) -> list[MoveTuple]:
    """Split a concatenated move-history string into (from, to, promotion) tuples.

    Raises:
        MalformedCodeError: when the string is not a sequence of move tokens.
    """
    if not MOVE_HISTORY_PATTERN.fullmatch(move_history):
        raise MalformedCodeError(f"Malformed move history {move_history!r}")
    return [
        (match.group(1), match.group(2), match.group(3))
        for match in MOVE_TOKEN_PATTERN.finditer(move_history)
    ]


def replay_move_history(rules: RulesEngine, move_history: str) -> Position:
    """Apply every move token from the starting position.

    The first malformed or illegal token aborts the replay; nothing partial is
    returned. The resulting position carries the normalized history (implicit
    queen promotions spelled out).
    """
    board = STARTING_BOARD
    tokens: list[str] = []
    for from_square, to_square, promotion in split_move_history(move_history):
        applied = rules.apply_move(board, from_square, to_square, promotion)
        if applied is None:
            raise IllegalMoveError(format_move_token(from_square, to_square, promotion), board)
        board = applied.board
        tokens.append(format_move_token(from_square, to_square, applied.promotion))
    return Position(board=board, move_history="".join(tokens))
