from .config import BrainConfig
from .core import GameBrain
from .errors import InvalidMoveError, MatchOverError, RPSBrainError, SessionNotFoundError
from .experts import Prediction, predict
from .history import MoveHistory, PatternTable
from .match import GAME_MODES, Match, RoundResult
from .registry import SessionRegistry
from .selector import MoveSelector
from .utils import BEATS, COUNTER, MOVES, Move, Outcome, resolve

__all__ = [
    "BEATS",
    "COUNTER",
    "GAME_MODES",
    "MOVES",
    "BrainConfig",
    "GameBrain",
    "InvalidMoveError",
    "Match",
    "MatchOverError",
    "Move",
    "MoveHistory",
    "MoveSelector",
    "Outcome",
    "PatternTable",
    "Prediction",
    "RPSBrainError",
    "RoundResult",
    "SessionNotFoundError",
    "SessionRegistry",
    "predict",
    "resolve",
]
