"""Rules engine port consumed by the move engine and parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chss.chess_side import ChessSide
from chss.models.game_status import GameStatus


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Board produced by a legal move."""

    board: str
    side_to_move: ChessSide
    promotion: str | None = None


class RulesEngine(Protocol):
    """Chess rules capability: legality, resulting boards and terminal states."""

    def apply_move(
        self,
        board: str,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> AppliedMove | None:
        """Return the board after the move, or None when the move is illegal."""

    def legal_destinations(self, board: str, from_square: str | None = None) -> set[str]:
        """Return destination squares of legal moves, optionally from one square."""

    def classify(self, board: str, move_history: str | None = None) -> GameStatus:
        """Classify the board as ongoing or one of the terminal outcomes."""

    def normalize(self, board: str) -> str:
        """Return the canonical rendering of a board; raise ValueError when invalid."""
