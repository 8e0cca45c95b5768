"""Rules engine adapter backed by python-chess."""

from __future__ import annotations

import chess

from chss.chess_side import ChessSide
from chss.define_codec_constants__const import (
    DEFAULT_PROMOTION,
    MOVE_TOKEN_PATTERN,
    PROMOTION_PIECES,
    STARTING_BOARD,
)
from chss.models.game_status import GameOutcome, GameStatus
from chss.ports.rules_engine import AppliedMove
from chss.utils.logger import get_logger

logger = get_logger(__name__)

_BACK_RANKS = chess.BB_RANK_1 | chess.BB_RANK_8


def _load_board(board: str) -> chess.Board | None:
    try:
        return chess.Board(board)
    except ValueError:
        logger.debug("Unparseable board %s", board)
        return None


def _side_of(board: chess.Board) -> ChessSide:
    return ChessSide.WHITE if board.turn == chess.WHITE else ChessSide.BLACK


def _needs_promotion(board: chess.Board, from_square: int, to_square: int) -> bool:
    return board.piece_type_at(from_square) == chess.PAWN and bool(
        chess.BB_SQUARES[to_square] & _BACK_RANKS
    )


def _replay(move_history: str) -> chess.Board | None:
    board = chess.Board(STARTING_BOARD)
    for match in MOVE_TOKEN_PATTERN.finditer(move_history):
        move = chess.Move.from_uci(match.group(0))
        if move not in board.legal_moves:
            return None
        board.push(move)
    return board


class PythonChessRulesEngine:
    """Implements the rules engine port with ``chess.Board``."""

    def apply_move(
        self,
        board: str,
        from_square: str,
        to_square: str,
        promotion: str | None = None,
    ) -> AppliedMove | None:
        current = _load_board(board)
        if current is None:
            return None
        try:
            source = chess.parse_square(from_square)
            target = chess.parse_square(to_square)
        except ValueError:
            return None
        promotion_piece = None
        if promotion:
            if promotion.lower() not in PROMOTION_PIECES:
                return None
            promotion_piece = chess.Piece.from_symbol(promotion.lower()).piece_type
        elif _needs_promotion(current, source, target):
            promotion = DEFAULT_PROMOTION
            promotion_piece = chess.QUEEN
        move = chess.Move(source, target, promotion=promotion_piece)
        if move not in current.legal_moves:
            return None
        current.push(move)
        return AppliedMove(
            board=current.fen(),
            side_to_move=_side_of(current),
            promotion=promotion.lower() if promotion_piece else None,
        )

    def legal_destinations(self, board: str, from_square: str | None = None) -> set[str]:
        current = _load_board(board)
        if current is None:
            return set()
        moves = current.legal_moves
        if from_square is not None:
            try:
                source = chess.parse_square(from_square)
            except ValueError:
                return set()
            return {chess.square_name(move.to_square) for move in moves if move.from_square == source}
        return {chess.square_name(move.to_square) for move in moves}

    def classify(self, board: str, move_history: str | None = None) -> GameStatus:
        current = _load_board(board)
        if current is None:
            return GameStatus(outcome=GameOutcome.ONGOING)
        if move_history:
            replayed = _replay(move_history)
            if replayed is not None and replayed.fen() == current.fen():
                current = replayed
        legal_move_count = current.legal_moves.count()
        outcome = GameOutcome.ONGOING
        if current.is_checkmate():
            outcome = GameOutcome.CHECKMATE
        elif current.is_stalemate():
            outcome = GameOutcome.STALEMATE
        elif current.is_insufficient_material():
            outcome = GameOutcome.DRAW_BY_MATERIAL
        elif current.halfmove_clock >= 100:
            outcome = GameOutcome.DRAW_BY_FIFTY
        elif current.is_repetition(3):
            outcome = GameOutcome.DRAW_BY_REPETITION
        return GameStatus(
            outcome=outcome,
            in_check=current.is_check(),
            legal_move_count=legal_move_count,
        )

    def normalize(self, board: str) -> str:
        current = chess.Board(board)
        if not current.is_valid():
            raise ValueError(f"Impossible position {board}")
        return current.fen()
