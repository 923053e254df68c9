"""FastAPI REST interface over a single shared game."""

import random
import threading

import chess
import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Literal, Optional

from chessduel.config import CONFIG
from chessduel.core.errors import GameError
from chessduel.core.rules import Notation
from chessduel.core.state import GameState, SinglePlayer, TwoPlayer

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

game = GameState(TwoPlayer())
_game_lock = threading.Lock()
# picks the human side for "random"; replaceable in tests
chooser = random.choice


class NewGameRequest(BaseModel):
    mode: Literal["single", "multi"] = "multi"
    color: Literal["white", "black", "random"] = "white"
    depth: Optional[int] = Field(default=None, ge=1)


class MoveRequest(BaseModel):
    move: str
    notation: Literal["san", "uci"] = "san"


def _color_name(color: Optional[chess.Color]) -> Optional[str]:
    return None if color is None else chess.COLOR_NAMES[color]


def _snapshot(ai_move: Optional[chess.Move] = None):
    board = game.board
    status = game.status()
    mode = game.mode
    return {
        "fen": board.fen(),
        "turn": _color_name(game.turn),
        "status": status.outcome.value,
        "winner": _color_name(status.winner),
        "moves": [m.uci() for m in game.moves],
        "legal_moves": [m.uci() for m in board.legal_moves],
        "mode": "single" if isinstance(mode, SinglePlayer) else "multi",
        "human_color": _color_name(mode.human_side) if isinstance(mode, SinglePlayer) else None,
        "ai_move": ai_move.uci() if ai_move else None,
    }


def _reply_if_ai_to_move() -> Optional[chess.Move]:
    if game.is_ai_turn() and not game.status().is_over:
        return game.play_ai_move()
    return None


@app.get("/game")
def get_game():
    with _game_lock:
        return _snapshot()


@app.post("/game")
def new_game(req: NewGameRequest = NewGameRequest()):
    global game
    with _game_lock:
        if req.mode == "multi":
            game = GameState(TwoPlayer())
        else:
            if req.color == "random":
                human_side = chooser([chess.WHITE, chess.BLACK])
            else:
                human_side = req.color == "white"
            try:
                mode = SinglePlayer(human_side, req.depth or CONFIG.search.depth)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
            game = GameState(mode)
        return _snapshot(_reply_if_ai_to_move())


@app.post("/move")
def make_move(req: MoveRequest):
    with _game_lock:
        if game.is_ai_turn():
            raise HTTPException(status_code=400, detail="It is the computer's turn")
        try:
            game.apply_from_notation(req.move, Notation.from_name(req.notation))
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _snapshot(_reply_if_ai_to_move())


@app.post("/undo")
def undo_move():
    with _game_lock:
        try:
            game.undo()
            if game.is_ai_turn() and game.moves:
                game.undo()
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        # the computer opened the game; let it move again
        return _snapshot(_reply_if_ai_to_move())


@app.post("/ai-move")
def ai_move():
    with _game_lock:
        if game.ai_side is not None and not game.is_ai_turn():
            raise HTTPException(status_code=400, detail="It is not the computer's turn")
        try:
            move = game.play_ai_move()
        except GameError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _snapshot(move)


def main() -> None:
    uvicorn.run(app, host="127.0.0.1", port=CONFIG.ui.api_port)


if __name__ == "__main__":
    main()
