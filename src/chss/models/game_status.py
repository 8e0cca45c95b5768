from enum import StrEnum

from pydantic import BaseModel, computed_field


class GameOutcome(StrEnum):
    """Terminal-state classification of a board."""

    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW_BY_FIFTY = "draw-by-fifty"
    DRAW_BY_REPETITION = "draw-by-repetition"
    DRAW_BY_MATERIAL = "draw-by-material"
    ONGOING = "ongoing"


class GameStatus(BaseModel):
    """Classification of a board for end-of-game display."""

    outcome: GameOutcome
    in_check: bool = False
    legal_move_count: int = 0

    @computed_field
    @property
    def is_game_over(self) -> bool:
        return self.outcome is not GameOutcome.ONGOING
