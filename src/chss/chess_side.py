from enum import StrEnum


class ChessSide(StrEnum):
    """
    Enumeration of the side-to-move letters used in the board's second field.

    Members:
        WHITE: "w"
        BLACK: "b"

    Methods:
        opponent() -> ChessSide:
            The side that moved last when this side is to move.
        label -> str:
            Human readable side name.
    """

    WHITE = "w"
    BLACK = "b"

    def opponent(self) -> "ChessSide":
        return ChessSide.BLACK if self is ChessSide.WHITE else ChessSide.WHITE

    @property
    def label(self) -> str:
        return "White" if self is ChessSide.WHITE else "Black"
