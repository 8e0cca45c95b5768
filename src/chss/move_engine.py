"""Apply moves to positions and keep their encoding annotations consistent."""

from __future__ import annotations

from chss.define_codec_constants__const import PROMOTION_PIECES, SQUARE_PATTERN
from chss.discovery_cache import DiscoveryCache
from chss.models.move_result import MoveResult
from chss.models.position import Position
from chss.position_dictionary import PositionDictionary
from chss.ports.rules_engine import RulesEngine
from chss.replay_move_history__moves import format_move_token, replay_move_history
from chss.utils.logger import get_logger

logger = get_logger(__name__)


def _known_history(position: Position) -> str | None:
    if position.move_history is not None:
        return position.move_history
    if position.is_starting:
        return ""
    return None


def _normalize_square(square: str) -> str | None:
    value = (square or "").strip().lower()
    return value if SQUARE_PATTERN.fullmatch(value) else None


class MoveEngine:
    """Advances positions through the rules engine."""

    def __init__(
        self,
        rules: RulesEngine,
        dictionary: PositionDictionary,
        cache: DiscoveryCache,
    ) -> None:
        self._rules = rules
        self._dictionary = dictionary
        self._cache = cache

    @property
    def rules(self) -> RulesEngine:
        return self._rules

    @property
    def dictionary(self) -> PositionDictionary:
        return self._dictionary

    @property
    def cache(self) -> DiscoveryCache:
        return self._cache

    def lookup_short_key(self, board: str) -> str | None:
        """Return the dictionary key for a board, else its discovered key."""
        key = self._dictionary.lookup_by_board(board)
        if key is not None:
            return key
        return self._cache.get(board)

    def apply_move(
        self,
        position: Position,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> MoveResult:
        """Play one move; illegal or malformed moves yield a rejected MoveResult."""
        source = _normalize_square(from_square)
        target = _normalize_square(to_square)
        if source is None or target is None:
            return MoveResult.rejected(f"Malformed squares {from_square!r} -> {to_square!r}")
        promotion = (promotion or "").strip().lower() or None
        if promotion is not None and promotion not in PROMOTION_PIECES:
            return MoveResult.rejected(f"Unknown promotion piece {promotion!r}")

        applied = self._rules.apply_move(position.board, source, target, promotion)
        if applied is None:
            token = format_move_token(source, target, promotion)
            logger.info("Rejected move %s for board %s", token, position.board)
            return MoveResult.rejected(f"Illegal move {token}")

        token = format_move_token(source, target, applied.promotion)
        history = _known_history(position)
        next_position = Position(
            board=applied.board,
            side_to_move=applied.side_to_move,
            move_history=history + token if history is not None else None,
            short_key=self.lookup_short_key(applied.board),
        )
        return MoveResult.accepted(next_position, token)

    def replay(self, move_history: str) -> Position:
        """Replay a move-history string from the start and annotate the result.

        Raises:
            MalformedCodeError: the string is not a sequence of move tokens.
            IllegalMoveError: a token is illegal in the position it is applied to.
        """
        position = replay_move_history(self._rules, move_history)
        short_key = self.lookup_short_key(position.board)
        if short_key is None:
            return position
        return position.model_copy(update={"short_key": short_key})
