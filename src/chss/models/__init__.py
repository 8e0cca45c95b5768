from chss.models.game_status import GameOutcome, GameStatus
from chss.models.move_request import MoveRequest
from chss.models.move_result import MoveResult
from chss.models.position import Position, validate_board_layout

__all__ = [
    "GameOutcome",
    "GameStatus",
    "MoveRequest",
    "MoveResult",
    "Position",
    "validate_board_layout",
]
