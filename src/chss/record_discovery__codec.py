from __future__ import annotations

from chss.discovery_cache import DiscoveryCache
from chss.encode_board__codec import encode_board


def record_discovery(cache: DiscoveryCache, board: str, move_history: str | None) -> bool:
    """Remember a move history as the board's short key when it beats the alternatives.

    A history is kept only when it is shorter than the board's full payload and
    shorter than any history already cached for the board.
    """
    if not move_history or len(move_history) >= len(encode_board(board)):
        return False
    return cache.put_if_shorter(board, move_history)
