import chess
from typing import Dict, Optional

from chessduel.config import CONFIG


class Evaluator:
    """Static material count.

    Scores are relative to `perspective`: own material minus the opponent's.
    The king carries a finite value (20 by default), so a position that wins
    material can outrank one that threatens mate at shallow depths.
    """

    def __init__(self, piece_values: Optional[Dict[str, int]] = None):
        values = piece_values or CONFIG.eval.piece_values
        # keyed by python-chess piece type for the hot loop
        self.values = {
            pt: int(values[chess.piece_name(pt).upper()])
            for pt in chess.PIECE_TYPES
        }

    def evaluate(self, board: chess.Board, perspective: chess.Color) -> int:
        score = 0
        for piece in board.piece_map().values():
            value = self.values[piece.piece_type]
            if piece.color == perspective:
                score += value
            else:
                score -= value
        return score
