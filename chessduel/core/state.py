"""Game state machine: position, turn, undo history and outcome."""

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple, Union

import chess

from chessduel.core.errors import (
    AiNotAvailableError,
    NoHistoryError,
    NoLegalMovesError,
)
from chessduel.core.rules import Notation, Outcome, RulesOracle
from chessduel.core.search import SearchEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwoPlayer:
    pass


@dataclass(frozen=True)
class SinglePlayer:
    human_side: chess.Color
    search_depth: int

    def __post_init__(self):
        if isinstance(self.search_depth, bool) or not isinstance(self.search_depth, int):
            raise ValueError(f"search depth must be an int, got {self.search_depth!r}")
        if self.search_depth < 1:
            raise ValueError(f"search depth must be positive, got {self.search_depth}")

    @property
    def ai_side(self) -> chess.Color:
        return not self.human_side


GameMode = Union[TwoPlayer, SinglePlayer]


@dataclass(frozen=True)
class Status:
    outcome: Outcome
    winner: Optional[chess.Color] = None

    @classmethod
    def checkmate(cls, winner: chess.Color) -> "Status":
        return cls(Outcome.CHECKMATE, winner)

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.ONGOING


Status.ONGOING = Status(Outcome.ONGOING)
Status.STALEMATE = Status(Outcome.STALEMATE)


class HistoryEntry(NamedTuple):
    position: chess.Board
    side: chess.Color
    move: chess.Move


class GameState:
    def __init__(self, mode: GameMode = TwoPlayer(),
                 oracle: Optional[RulesOracle] = None,
                 search: Optional[SearchEngine] = None):
        self.oracle = oracle or RulesOracle()
        self.search = search or SearchEngine(oracle=self.oracle)
        self._mode = mode
        self._position = self.oracle.default()
        self._turn = chess.WHITE
        # one entry per applied move; the move log is derived from it
        self._history: List[HistoryEntry] = []

    @classmethod
    def two_player(cls) -> "GameState":
        return cls(TwoPlayer())

    @classmethod
    def single_player(cls, human_side: chess.Color, depth: int) -> "GameState":
        return cls(SinglePlayer(human_side, depth))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def turn(self) -> chess.Color:
        return self._turn

    @property
    def board(self) -> chess.Board:
        """A copy of the current position; mutating it does not affect the game."""
        return self._position.copy(stack=False)

    @property
    def moves(self) -> Tuple[chess.Move, ...]:
        return tuple(entry.move for entry in self._history)

    @property
    def ai_side(self) -> Optional[chess.Color]:
        if isinstance(self._mode, SinglePlayer):
            return self._mode.ai_side
        return None

    def is_ai_turn(self) -> bool:
        return self.ai_side is not None and self._turn == self.ai_side

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_move(self, move: chess.Move) -> None:
        """Apply an already validated move."""
        self._history.append(HistoryEntry(self._position, self._turn, move))
        self._position = self.oracle.apply(self._position, move)
        self._turn = not self._turn
        logger.debug("applied %s (ply %d)", move.uci(), len(self._history))

    def apply_from_notation(self, text: str,
                            notation: Notation = Notation.ALGEBRAIC) -> chess.Move:
        move = self.oracle.parse(text, notation, self._position)
        self.apply_move(move)
        return move

    def undo(self) -> chess.Move:
        if not self._history:
            raise NoHistoryError()
        entry = self._history.pop()
        self._position = entry.position
        self._turn = entry.side
        logger.debug("undid %s (ply %d)", entry.move.uci(), len(self._history))
        return entry.move

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def status(self) -> Status:
        outcome = self.oracle.status_for(self._position)
        if outcome is Outcome.CHECKMATE:
            # the side to move is mated
            return Status.checkmate(not self._turn)
        if outcome is Outcome.STALEMATE:
            return Status.STALEMATE
        return Status.ONGOING

    def get_ai_move(self) -> chess.Move:
        """Search for the computer's move without applying it."""
        if not isinstance(self._mode, SinglePlayer):
            raise AiNotAvailableError()
        move = self.search.best_move(self._position, self._mode.search_depth,
                                     self._mode.ai_side)
        if move is None:
            raise NoLegalMovesError()
        return move

    def play_ai_move(self) -> chess.Move:
        move = self.get_ai_move()
        self.apply_move(move)
        return move
