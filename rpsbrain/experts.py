from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import BrainConfig
from .history import PatternTable
from .utils import MOVES, Move, clamp_confidence, round_half_up


@dataclass(frozen=True)
class Prediction:
    move: Move
    confidence: int
    strategy: str = "random"

    def to_dict(self) -> Dict[str, object]:
        return {"move": self.move.label, "confidence": self.confidence, "strategy": self.strategy}


class Tally:
    """Move counts plus the order in which each move was first seen."""

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        self.counts: Dict[Move, int] = {}
        self.order: List[Move] = []
        for m in moves:
            self.add(m)

    def add(self, move: Move) -> None:
        if move not in self.counts:
            self.order.append(move)
            self.counts[move] = 0
        self.counts[move] += 1

    def total(self) -> int:
        return sum(self.counts.values())

    def top(self) -> Tuple[Move, int]:
        # Walk in first-seen order; an equal count replaces the current best,
        # so the latest-seen of the tied moves wins.
        if not self.order:
            raise ValueError("empty tally")
        best = self.order[0]
        for m in self.order[1:]:
            if self.counts[m] >= self.counts[best]:
                best = m
        return best, self.counts[best]


def pattern_expert(history: Sequence[Move], table: PatternTable, cap: int = 90) -> Optional[Prediction]:
    """Predict the move that most often followed the current 2-move window.

    Only fires when the window has occurred before its present occurrence.
    """
    if len(history) < 2:
        return None
    key = (history[-2], history[-1])
    if table[key] <= 1:
        return None
    followers = Tally(
        history[i] for i in range(2, len(history))
        if history[i - 2] == key[0] and history[i - 1] == key[1]
    )
    if not followers.order:
        return None
    move, count = followers.top()
    conf = clamp_confidence(round_half_up(100.0 * count / followers.total()), cap)
    return Prediction(move, conf, "pattern")


def frequency_expert(history: Sequence[Move], cap: int = 75) -> Prediction:
    """Predict the player's most used move overall."""
    move, count = Tally(history).top()
    conf = clamp_confidence(round_half_up(100.0 * count / len(history)), cap)
    return Prediction(move, conf, "frequency")


def alternation_expert(history: Sequence[Move], base: Prediction, bonus: int = 15, cap: int = 85) -> Optional[Prediction]:
    """If the last three moves each differ from their predecessor, predict the move not just played."""
    if len(history) < 3:
        return None
    a, b, c = history[-3], history[-2], history[-1]
    if a == b or b == c:
        return None
    unused = [m for m in MOVES if m != b and m != c]
    assert len(unused) == 1, f"no unique unused move after {b.label}, {c.label}"
    return Prediction(unused[0], clamp_confidence(base.confidence + bonus, cap), "alternation")


def predict(
    history: Sequence[Move],
    table: PatternTable,
    rng: random.Random,
    config: Optional[BrainConfig] = None,
) -> Prediction:
    """Predict the player's next move from the rounds already played.

    Read-only over ``history`` and ``table``; the move for the round in
    progress is never an input.
    """
    cfg = config or BrainConfig()
    if len(history) < 2:
        return Prediction(rng.choice(MOVES), clamp_confidence(cfg.cold_start_confidence), "random")

    pred = pattern_expert(history, table, cap=cfg.pattern_cap)
    if pred is None:
        pred = frequency_expert(history, cap=cfg.frequency_cap)

    alt = alternation_expert(history, pred, bonus=cfg.alternation_bonus, cap=cfg.alternation_cap)
    if alt is not None:
        pred = alt
    return pred
