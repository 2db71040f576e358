from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Dict, Tuple, Union

from .errors import InvalidMoveError


class Move(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union["Move", int, str]) -> "Move":
        """Accept a Move, an index 0..2 or a case-insensitive name."""
        if isinstance(value, Move):
            return value
        if isinstance(value, bool):
            raise InvalidMoveError(value)
        if isinstance(value, int):
            if 0 <= value < 3:
                return cls(value)
            raise InvalidMoveError(value)
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidMoveError(value) from None
        raise InvalidMoveError(value)


class Outcome(str, Enum):
    """Round result from the human player's perspective."""

    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


MOVES: Tuple[Move, ...] = (Move.ROCK, Move.PAPER, Move.SCISSORS)

# What each move beats
BEATS: Dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}

# The move that beats each move
COUNTER: Dict[Move, Move] = {v: k for k, v in BEATS.items()}


def resolve(player_move: Move, opponent_move: Move) -> Outcome:
    if player_move == opponent_move:
        return Outcome.TIE
    return Outcome.WIN if BEATS[player_move] == opponent_move else Outcome.LOSE


def counter_move(move: Move) -> Move:
    return COUNTER[move]


def round_half_up(x: float) -> int:
    # 12.5 -> 13, unlike round() which gives 12
    return int(math.floor(x + 0.5))


def clamp_confidence(value: int, cap: int = 100) -> int:
    return max(0, min(cap, 100, int(value)))


def check_probability(name: str, p: float) -> float:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {p}")
    return p
