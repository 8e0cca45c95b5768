"""Static bidirectional table of short keys and well-known boards."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from chss.errors import ChssError
from chss.ports.rules_engine import RulesEngine
from chss.replay_move_history__moves import replay_move_history
from chss.utils.logger import get_logger

logger = get_logger(__name__)


def _is_valid_key(key: object) -> bool:
    return isinstance(key, str) and key.isascii() and key.isalnum()


@dataclass(frozen=True)
class PositionDictionary:
    """Read-only key/board table built once at start-up.

    ``lines_by_key`` keeps the move history each key was built from so resolved
    positions can keep extending it.
    """

    boards_by_key: Mapping[str, str] = field(default_factory=dict)
    keys_by_board: Mapping[str, str] = field(default_factory=dict)
    lines_by_key: Mapping[str, str] = field(default_factory=dict)

    def lookup_by_key(self, key: str) -> str | None:
        return self.boards_by_key.get(key)

    def lookup_by_board(self, board: str) -> str | None:
        return self.keys_by_board.get(board)

    def line_for_key(self, key: str) -> str | None:
        return self.lines_by_key.get(key)

    def __len__(self) -> int:
        return len(self.boards_by_key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.boards_by_key)

    @classmethod
    def from_lines(cls, lines: Mapping[str, str], rules: RulesEngine) -> PositionDictionary:
        """Replay each key's move history and index the resulting boards.

        Invalid keys and lines that fail to replay are logged and skipped. When two
        keys reach the same board the first one keeps the reverse mapping.
        """
        boards_by_key: dict[str, str] = {}
        keys_by_board: dict[str, str] = {}
        lines_by_key: dict[str, str] = {}
        for key, line in lines.items():
            if not _is_valid_key(key) or not isinstance(line, str):
                logger.warning("Skipping dictionary entry with invalid key %r", key)
                continue
            try:
                position = replay_move_history(rules, line)
            except ChssError as exc:
                logger.warning("Skipping dictionary key %s: %s", key, exc)
                continue
            boards_by_key[key] = position.board
            lines_by_key[key] = position.move_history or ""
            keys_by_board.setdefault(position.board, key)
        return cls(
            boards_by_key=MappingProxyType(boards_by_key),
            keys_by_board=MappingProxyType(keys_by_board),
            lines_by_key=MappingProxyType(lines_by_key),
        )
