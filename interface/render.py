"""Plain-text rendering of boards and move lists for the terminal."""

from typing import Sequence

import chess

GLYPHS = {
    "P": "♙", "N": "♘", "B": "♗", "R": "♖", "Q": "♕", "K": "♔",
    "p": "♟", "n": "♞", "b": "♝", "r": "♜", "q": "♛", "k": "♚",
}


def render_board(board: chess.Board, orientation: chess.Color = chess.WHITE) -> str:
    """Draw the board with `orientation` at the bottom."""
    if orientation == chess.WHITE:
        ranks, files = range(7, -1, -1), range(8)
    else:
        ranks, files = range(8), range(7, -1, -1)

    lines = []
    for rank in ranks:
        row = []
        for file in files:
            piece = board.piece_at(chess.square(file, rank))
            row.append(GLYPHS[piece.symbol()] if piece else ".")
        lines.append(f"{rank + 1}  " + " ".join(row))
    lines.append("   " + " ".join(chess.FILE_NAMES[f] for f in files))
    return "\n".join(lines) + "\n"


def format_move_history(moves: Sequence[chess.Move]) -> str:
    """Numbered move pairs in UCI, white first."""
    lines = ["Move history:"]
    for i in range(0, len(moves), 2):
        pair = " ".join(m.uci() for m in moves[i:i + 2])
        lines.append(f"{i // 2 + 1}. {pair}")
    return "\n".join(lines) + "\n"
