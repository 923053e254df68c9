"""Rules oracle over python-chess.

Positions are chess.Board snapshots that are never mutated once handed out;
apply() always works on a copy.
"""

from enum import Enum
from typing import List

import chess

from chessduel.core.errors import IllegalMoveError, InvalidNotationError


class Outcome(Enum):
    ONGOING = "ongoing"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


class Notation(Enum):
    COORDINATE = "uci"  # e2e4, e7e8q
    ALGEBRAIC = "san"   # e4, Nf3, Qxd7+

    @classmethod
    def from_name(cls, name: str) -> "Notation":
        """Accept 'uci'/'san' as well as the member names."""
        key = name.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown notation: {name!r}")


class RulesOracle:
    def default(self) -> chess.Board:
        return chess.Board()

    def legal_moves_for(self, position: chess.Board) -> List[chess.Move]:
        """Legal moves in python-chess generation order (the search tie-break)."""
        return list(position.legal_moves)

    def apply(self, position: chess.Board, move: chess.Move) -> chess.Board:
        child = position.copy(stack=False)
        child.push(move)
        return child

    def status_for(self, position: chess.Board) -> Outcome:
        if any(position.generate_legal_moves()):
            return Outcome.ONGOING
        if position.is_check():
            return Outcome.CHECKMATE
        return Outcome.STALEMATE

    def is_check(self, position: chess.Board) -> bool:
        return position.is_check()

    def parse(self, text: str, notation: Notation, position: chess.Board) -> chess.Move:
        """Parse `text` in the context of `position`.

        Raises InvalidNotationError when the text is not a move in the given
        notation and IllegalMoveError when it is one but cannot be played.
        """
        text = text.strip()
        if not text:
            raise InvalidNotationError()

        if notation is Notation.COORDINATE:
            try:
                move = chess.Move.from_uci(text)
            except chess.InvalidMoveError:
                raise InvalidNotationError()
        else:
            try:
                move = position.parse_san(text)
            except chess.IllegalMoveError:
                raise IllegalMoveError()
            except (chess.InvalidMoveError, chess.AmbiguousMoveError):
                raise InvalidNotationError()

        # null moves parse in both notations but are never legal
        if not move or move not in position.legal_moves:
            raise IllegalMoveError()
        return move
