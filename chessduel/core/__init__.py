"""Core game components: rules oracle, evaluator, search and game state."""

from .errors import (
    GameError,
    InvalidNotationError,
    IllegalMoveError,
    NoHistoryError,
    AiNotAvailableError,
    NoLegalMovesError,
)
from .rules import RulesOracle, Notation, Outcome
from .evaluator import Evaluator
from .search import SearchEngine, SearchResult
from .state import GameState, TwoPlayer, SinglePlayer, Status
