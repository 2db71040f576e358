from __future__ import annotations

import random
from typing import Optional

from .experts import Prediction
from .utils import MOVES, Move, check_probability, counter_move


class MoveSelector:
    """Turns a prediction into the bot's move.

    Plays the counter to the predicted move with probability
    ``counter_probability`` and a uniformly random move otherwise, so even a
    player who knows the prediction cannot exploit the bot every round.
    """

    def __init__(self, rng: Optional[random.Random] = None, counter_probability: float = 0.7):
        self.rng = rng or random.Random()
        self.counter_probability = check_probability("counter_probability", counter_probability)

    def choose(self, prediction: Prediction) -> Move:
        if self.rng.random() < self.counter_probability:
            return counter_move(prediction.move)
        return self.rng.choice(MOVES)

    def counter_rate(self, accuracy: float = 1.0) -> float:
        """Expected share of rounds where the bot plays the counter to the actual move."""
        hit = self.counter_probability + (1.0 - self.counter_probability) / 3.0
        return accuracy * hit + (1.0 - accuracy) * (1.0 - self.counter_probability) / 3.0
