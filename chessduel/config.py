# chessduel/config.py
from dataclasses import dataclass, field
from typing import Dict
import os
import tomllib  # python >=3.11

# Material values in pawns. The king is deliberately finite.
PIECE_VALUES = {
    "PAWN": 1,
    "KNIGHT": 3,
    "BISHOP": 3,
    "ROOK": 5,
    "QUEEN": 9,
    "KING": 20,
}

@dataclass
class SearchConfig:
    # 3 plies rather than 7: a pure-Python search at depth 7 takes minutes per move
    depth: int = 3

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())

@dataclass
class UIConfig:
    engine_name: str = "chessduel"
    api_port: int = 8000
    default_notation: str = "san"  # "san" or "uci"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "WARNING"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("CHESSDUEL_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
try:
    override_depth = os.environ.get("CHESSDUEL_SEARCH_DEPTH")
    if override_depth:
        CONFIG.search.depth = int(override_depth)
except ValueError:
    pass
