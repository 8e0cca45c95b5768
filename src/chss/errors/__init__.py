"""Custom error types used in chss."""


class ChssError(Exception):
    """Base class for position-code errors."""


class MalformedCodeError(ChssError, ValueError):
    """A position code or move-history string could not be decoded."""


class IllegalMoveError(ChssError, ValueError):
    """A move was rejected by the rules engine."""

    def __init__(self, move_token: str, board: str) -> None:
        super().__init__(f"Illegal move {move_token} for board {board}")
        self.move_token = move_token
        self.board = board
