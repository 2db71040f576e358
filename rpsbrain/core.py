from __future__ import annotations

import copy
import logging
import random
from typing import Optional, Tuple, Union

from .config import BrainConfig
from .experts import Prediction, predict
from .history import MoveHistory, PatternTable
from .selector import MoveSelector
from .utils import Move, Outcome, resolve

logger = logging.getLogger(__name__)


class GameBrain:
    """
    Adaptive rock-paper-scissors opponent for one game session.

    - Records the human player's moves and a 2-move pattern table
    - Predicts the next move from pattern continuation, overall frequency
      and alternation, with a capped confidence
    - Counters the prediction most of the time, plays randomly otherwise

    Per round, call ``choose_opponent_move`` first, then
    ``record_player_move`` with the move the player actually made.
    """

    def __init__(
        self,
        config: Optional[BrainConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or BrainConfig()
        if rng is None:
            rng = random.Random(seed if seed is not None else self.config.random_seed)
        self.rng = rng
        self.history = MoveHistory()
        self.selector = MoveSelector(self.rng, self.config.counter_probability)
        self.last_prediction: Optional[Prediction] = None
        # prediction for the round in progress; dropped once that round is recorded
        self._pending: Optional[Prediction] = None

    # ---------------------- Public API ----------------------
    def choose_opponent_move(self) -> Move:
        pred = self.predict_next_move()
        move = self.selector.choose(pred)
        self.last_prediction = pred
        logger.debug(
            "round %d: predicted %s (%d%%, %s), playing %s",
            len(self.history) + 1, pred.move.label, pred.confidence, pred.strategy, move.label,
        )
        return move

    def record_player_move(self, move: Union[Move, int, str]) -> None:
        self.history.append(Move.parse(move))
        self._pending = None

    def resolve_round(self, player_move: Union[Move, int, str], opponent_move: Union[Move, int, str]) -> Outcome:
        return resolve(Move.parse(player_move), Move.parse(opponent_move))

    def reset(self) -> None:
        self.history.clear()
        self.last_prediction = None
        self._pending = None
        logger.debug("brain reset")

    # ---------------------- Read-only helpers ----------------------
    def predict_next_move(self) -> Prediction:
        """Prediction the bot will act on this round.

        Computed once per round over the moves recorded so far, so showing it
        does not change the bot's move or consume the rng again.
        """
        if self._pending is None:
            self._pending = predict(self.history.snapshot(), self.history.patterns, self.rng, self.config)
        return self._pending

    @property
    def moves(self) -> Tuple[Move, ...]:
        return self.history.snapshot()

    @property
    def pattern_table(self) -> PatternTable:
        return self.history.patterns

    def clone(self) -> "GameBrain":
        return copy.deepcopy(self)

    def __len__(self) -> int:
        return len(self.history)
