"""Position-code facade wiring the rules engine, dictionary and discovery cache."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from chss.build_position_dictionary__dictionary import build_position_dictionary
from chss.config import Settings, get_settings
from chss.discovery_cache import DiscoveryCache
from chss.generate_code__codec import generate_code
from chss.infra.python_chess_rules_engine import PythonChessRulesEngine
from chss.models.game_status import GameStatus
from chss.models.move_result import MoveResult
from chss.models.position import Position
from chss.move_engine import MoveEngine
from chss.parse_code__codec import parse_code
from chss.position_dictionary import PositionDictionary
from chss.ports.rules_engine import RulesEngine
from chss.utils.logger import get_logger, set_level

logger = get_logger(__name__)


@dataclass(frozen=True)
class CanonicalCode:
    """An incoming code resolved to its position and preferred form."""

    position: Position
    code: str
    needs_redirect: bool


class PositionCodec:
    """Parses and generates position codes and plays moves between them."""

    def __init__(
        self,
        rules: RulesEngine,
        dictionary: PositionDictionary,
        cache: DiscoveryCache,
    ) -> None:
        self._engine = MoveEngine(rules, dictionary, cache)

    @property
    def engine(self) -> MoveEngine:
        return self._engine

    def parse(self, token: str | None) -> Position:
        return parse_code(token, self._engine)

    def generate(self, position: Position) -> str:
        return generate_code(position, self._engine)

    def apply_move(
        self,
        position: Position,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> MoveResult:
        return self._engine.apply_move(position, from_square, to_square, promotion)

    def legal_destinations(self, position: Position, from_square: str | None = None) -> set[str]:
        return self._engine.rules.legal_destinations(position.board, from_square)

    def classify(self, position: Position) -> GameStatus:
        return self._engine.rules.classify(position.board, position.move_history)

    def canonicalize(self, token: str | None) -> CanonicalCode:
        """Resolve a code and report whether it differs from its canonical form."""
        code = (token or "").strip()
        position = self.parse(code)
        preferred = self.generate(position)
        return CanonicalCode(
            position=position,
            code=preferred,
            needs_redirect=bool(code) and code != preferred,
        )


def build_codec(settings: Settings | None = None, rules: RulesEngine | None = None) -> PositionCodec:
    """Build a codec with its own dictionary and discovery cache."""
    settings = settings or get_settings()
    rules = rules or PythonChessRulesEngine()
    dictionary = build_position_dictionary(rules, settings.dictionary_path)
    cache = DiscoveryCache(settings.discovery_cache_capacity)
    return PositionCodec(rules, dictionary, cache)


@lru_cache(maxsize=1)
def get_codec() -> PositionCodec:
    """Return the process-wide codec, built once from settings."""
    settings = get_settings()
    set_level(settings.log_level)
    logger.info(
        "Building position codec (discovery cache capacity %s)",
        settings.discovery_cache_capacity,
    )
    return build_codec(settings)
