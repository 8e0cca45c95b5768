"""Constants shared by the position-code parser and generator."""

from __future__ import annotations

import re

STARTING_BOARD = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

SHORT_KEY_PREFIX = "u-"
FULL_BOARD_PREFIX = "f-"
PREFIX_LENGTH = 2

BOARD_FIELD_COUNT = 6
BOARD_RANK_COUNT = 8

PROMOTION_PIECES = "nbrq"
DEFAULT_PROMOTION = "q"

SQUARE_PATTERN = re.compile(r"[a-h][1-8]")
# A promotion letter followed by a rank digit is the next move's source square.
MOVE_TOKEN_PATTERN = re.compile(r"([a-h][1-8])([a-h][1-8])([nbrq](?![1-8]))?")
MOVE_HISTORY_PATTERN = re.compile(r"(?:[a-h][1-8][a-h][1-8](?:[nbrq](?![1-8]))?)*")
