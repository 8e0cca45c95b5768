"""Immutable position value object shared by the parser, generator and move engine."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from chss.chess_side import ChessSide
from chss.define_codec_constants__const import (
    BOARD_FIELD_COUNT,
    BOARD_RANK_COUNT,
    MOVE_HISTORY_PATTERN,
    STARTING_BOARD,
)

_RANK_PIECES = frozenset("pnbrqkPNBRQK")
_CASTLING_PATTERN = re.compile(r"-|K?Q?k?q?")
_EN_PASSANT_PATTERN = re.compile(r"-|[a-h][36]")


def _validate_rank(rank: str) -> None:
    width = 0
    for char in rank:
        if char in _RANK_PIECES:
            width += 1
        elif char in "12345678":
            width += int(char)
        else:
            raise ValueError(f"Unexpected character {char!r} in rank {rank!r}")
    if width != BOARD_RANK_COUNT:
        raise ValueError(f"Rank {rank!r} spans {width} squares")


def validate_board_layout(board: str) -> list[str]:
    """Check the six-field layout of a board string and return its fields."""
    fields = board.split(" ")
    if len(fields) != BOARD_FIELD_COUNT:
        raise ValueError(f"Board needs {BOARD_FIELD_COUNT} fields, got {len(fields)}")
    placement, side, castling, en_passant, halfmove, fullmove = fields
    ranks = placement.split("/")
    if len(ranks) != BOARD_RANK_COUNT:
        raise ValueError(f"Board needs {BOARD_RANK_COUNT} ranks, got {len(ranks)}")
    for rank in ranks:
        _validate_rank(rank)
    if side not in {member.value for member in ChessSide}:
        raise ValueError(f"Unknown side to move {side!r}")
    if not castling or not _CASTLING_PATTERN.fullmatch(castling):
        raise ValueError(f"Bad castling field {castling!r}")
    if not _EN_PASSANT_PATTERN.fullmatch(en_passant):
        raise ValueError(f"Bad en-passant field {en_passant!r}")
    if not halfmove.isdigit() or not fullmove.isdigit():
        raise ValueError("Move counters must be non-negative integers")
    return fields


class Position(BaseModel):
    """A chess position plus the optional annotations used to encode it compactly.

    ``side_to_move`` is derived from the board when omitted. ``move_history`` is the
    concatenated move tokens from the starting position, and ``short_key`` a key the
    dictionary or discovery cache maps back to this board. Both are hints: consumers
    recompute when they are absent.
    """

    model_config = ConfigDict(frozen=True)

    board: str
    side_to_move: ChessSide
    move_history: str | None = None
    short_key: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_side_to_move(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("side_to_move") is not None:
            return data
        board = data.get("board")
        if isinstance(board, str):
            fields = board.split(" ")
            if len(fields) > 1:
                return {**data, "side_to_move": fields[1]}
        return data

    @field_validator("board")
    @classmethod
    def _check_board(cls, value: str) -> str:
        validate_board_layout(value)
        return value

    @field_validator("move_history")
    @classmethod
    def _check_move_history(cls, value: str | None) -> str | None:
        if value is not None and not MOVE_HISTORY_PATTERN.fullmatch(value):
            raise ValueError(f"Malformed move history {value!r}")
        return value

    @model_validator(mode="after")
    def _check_side_consistency(self) -> Position:
        if self.board.split(" ")[1] != self.side_to_move.value:
            raise ValueError("side_to_move does not match the board")
        return self

    @classmethod
    def starting(cls) -> Position:
        """Return the standard initial position, white to move."""
        return cls(board=STARTING_BOARD)

    @property
    def is_starting(self) -> bool:
        return self.board == STARTING_BOARD
