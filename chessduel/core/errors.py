"""Recoverable game errors.

Every failure the core can report derives from GameError so drivers can catch
a single type, print the message and re-prompt.
"""


class GameError(Exception):
    default_message = "Game error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class InvalidNotationError(GameError):
    default_message = "Invalid input format!"


class IllegalMoveError(GameError):
    default_message = "Illegal move!"


class NoHistoryError(GameError):
    default_message = "No moves to undo!"


class AiNotAvailableError(GameError):
    default_message = "AI is only available in single player mode!"


class NoLegalMovesError(GameError):
    default_message = "No legal moves available!"
