from __future__ import annotations

from pydantic import BaseModel

from chss.models.position import Position


class MoveResult(BaseModel):
    """Outcome of applying one move: the new position, or the rejection reason."""

    success: bool
    position: Position | None = None
    move_token: str | None = None
    error: str | None = None

    @classmethod
    def accepted(cls, position: Position, move_token: str) -> MoveResult:
        return cls(success=True, position=position, move_token=move_token)

    @classmethod
    def rejected(cls, reason: str) -> MoveResult:
        return cls(success=False, error=reason)
