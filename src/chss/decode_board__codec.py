from __future__ import annotations

import base64
import binascii

from chss.errors import MalformedCodeError


def decode_board(payload: str) -> str:
    """Decode an unpadded URL-safe base64 payload back into a board string.

    Raises:
        MalformedCodeError: the payload is not base64, not UTF-8, or has no field separator.
    """
    if not payload:
        raise MalformedCodeError("Empty board payload")
    padded = payload + "=" * (-len(payload) % 4)
    try:
        raw = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
        board = raw.decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise MalformedCodeError(f"Undecodable board payload {payload!r}") from exc
    if " " not in board:
        raise MalformedCodeError(f"Decoded board {board!r} has no field separator")
    return board
