"""Terminal front-end: mode selection and the interactive game loop."""

import argparse
import logging
import random
import sys
from typing import Callable, Optional, Sequence

import chess

from chessduel.config import CONFIG
from chessduel.core.errors import GameError
from chessduel.core.rules import Notation
from chessduel.core.state import GameState, SinglePlayer, TwoPlayer
from interface.render import format_move_history, render_board

logger = logging.getLogger(__name__)

SIDES = {"white": chess.WHITE, "black": chess.BLACK}


class CLI:
    def __init__(self, input_fn: Callable[[str], str] = input, output=None,
                 chooser: Callable[[Sequence[chess.Color]], chess.Color] = random.choice,
                 depth: Optional[int] = None, notation: Optional[Notation] = None):
        self.input_fn = input_fn
        self.output = output or sys.stdout
        self.chooser = chooser
        self.depth = depth or CONFIG.search.depth
        self.notation = notation or Notation.from_name(CONFIG.ui.default_notation)

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def _ask(self, prompt: str) -> str:
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            return "quit"

    def _choose(self, prompt: str, options: Sequence[str]) -> str:
        while True:
            answer = self._ask(prompt).lower()
            if answer in options:
                return answer
            self._print("Illegal input, please try again.")

    def intro(self) -> Optional[GameState]:
        self._print("WELCOME TO CHESS!!")
        choice = self._choose("Select game mode (single or multi, quit to exit): ",
                              ("quit", "single", "multi"))
        if choice == "single":
            return self.single_player()
        if choice == "multi":
            return self.two_player()
        return None

    def two_player(self) -> GameState:
        game = GameState(TwoPlayer())
        self.play(game)
        return game

    def single_player(self, color: Optional[str] = None) -> GameState:
        if color is None:
            color = self._choose(
                "Select your color (white or black, random to choose randomly): ",
                ("white", "black", "random"))
        if color == "random":
            human_side = self.chooser([chess.WHITE, chess.BLACK])
            self._print(f"You play {chess.COLOR_NAMES[human_side]}.")
        else:
            human_side = SIDES[color]
        game = GameState(SinglePlayer(human_side, self.depth))
        self.play(game)
        return game

    def play(self, game: GameState) -> None:
        """Run the loop until checkmate, stalemate or `quit`."""
        while True:
            orientation = game.turn if game.ai_side is None else not game.ai_side
            self._print(render_board(game.board, orientation))

            if game.is_ai_turn():
                try:
                    move = game.play_ai_move()
                except GameError as e:
                    self._print(str(e))
                    return
                self._print(f"Computer plays: {move.uci()}")
            else:
                command = self._ask("Enter move: ")
                if command == "quit":
                    return
                if command == "print":
                    self._print(format_move_history(game.moves))
                    continue
                try:
                    if command == "undo":
                        self._undo(game)
                    else:
                        game.apply_from_notation(command, self.notation)
                except GameError as e:
                    self._print(str(e))
                    continue

            status = game.status()
            if status.winner is not None:
                self._print(f"Game Over: {chess.COLOR_NAMES[status.winner].capitalize()} wins!")
                return
            if status.is_over:
                self._print("Stalemate")
                return

    def _undo(self, game: GameState) -> None:
        game.undo()
        # take back the computer's reply too so the human is on move again
        if game.is_ai_turn() and game.moves:
            game.undo()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play chess in the terminal.")
    parser.add_argument("--mode", choices=["single", "multi"],
                        help="skip the mode prompt")
    parser.add_argument("--color", choices=["white", "black", "random"],
                        help="your colour in single player mode")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth,
                        help="computer search depth in plies")
    parser.add_argument("--uci", action="store_true",
                        help="enter moves in coordinate notation (e2e4)")
    parser.add_argument("--log-level", default=CONFIG.log_level)
    args = parser.parse_args(argv)

    if args.depth < 1:
        parser.error("--depth must be positive")

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    notation = Notation.COORDINATE if args.uci else None
    cli = CLI(depth=args.depth, notation=notation)
    if args.mode == "single":
        cli.single_player(args.color)
    elif args.mode == "multi":
        cli.two_player()
    else:
        cli.intro()


if __name__ == "__main__":
    main()
