from __future__ import annotations

import base64


def encode_board(board: str) -> str:
    """Return the unpadded URL-safe base64 form of a board string."""
    return base64.urlsafe_b64encode(board.encode("utf-8")).decode("ascii").rstrip("=")
