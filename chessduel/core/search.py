import logging
import time
from typing import NamedTuple, Optional

import chess

from chessduel.core.evaluator import Evaluator
from chessduel.core.rules import Outcome, RulesOracle
from chessduel.core.utils import format_search_info

logger = logging.getLogger(__name__)

INF = 10**9


class SearchResult(NamedTuple):
    score: int
    best_move: Optional[chess.Move]


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None,
                 oracle: Optional[RulesOracle] = None):
        self.evaluator = evaluator or Evaluator()
        self.oracle = oracle or RulesOracle()
        self.nodes = 0

    def best_move(self, board: chess.Board, depth: int,
                  side: chess.Color) -> Optional[chess.Move]:
        """Root call: best move for `side` at `depth` plies, None if terminal."""
        self.nodes = 0
        start_time = time.time()
        score, move = self.search(board, depth, side)
        elapsed = time.time() - start_time
        logger.debug(format_search_info(depth, score, self.nodes, elapsed, move, side))
        return move

    def search(self, board: chess.Board, depth: int, perspective: chess.Color,
               alpha: int = -INF, beta: int = INF) -> SearchResult:
        """Depth-limited negamax with alpha-beta pruning.

        The returned score is relative to `perspective`. Moves are expanded in
        the oracle's order and only a strictly better score replaces the
        current best, so the first of several equal moves wins. Siblings left
        after a cutoff are never looked at, even if they would tie.
        """
        self.nodes += 1
        if depth == 0 or self.oracle.status_for(board) is not Outcome.ONGOING:
            return SearchResult(self.evaluator.evaluate(board, perspective), None)

        best_score = -INF
        best_move = None
        for move in self.oracle.legal_moves_for(board):
            child = self.oracle.apply(board, move)
            score = -self.search(child, depth - 1, not perspective, -beta, -alpha).score

            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, score)
            if beta <= alpha:
                break

        return SearchResult(best_score, best_move)
