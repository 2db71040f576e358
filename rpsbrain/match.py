from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .core import GameBrain
from .errors import MatchOverError
from .experts import Prediction
from .utils import Move, Outcome, round_half_up

logger = logging.getLogger(__name__)

GAME_MODES = (20, 50, 100)


@dataclass
class RoundResult:
    number: int
    player_move: Move
    bot_move: Move
    outcome: Outcome
    prediction: Prediction

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.number,
            "player_move": self.player_move.label,
            "bot_move": self.bot_move.label,
            "result": self.outcome.value,
            "prediction": self.prediction.to_dict(),
        }


@dataclass
class Match:
    """A fixed-length match between the player and one GameBrain."""

    total_rounds: int
    brain: GameBrain = field(default_factory=GameBrain)
    player_score: int = 0
    bot_score: int = 0
    rounds: List[RoundResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.total_rounds, bool) or not isinstance(self.total_rounds, int) or self.total_rounds <= 0:
            raise ValueError(f"total_rounds must be a positive int, got {self.total_rounds!r}")

    @property
    def current_round(self) -> int:
        return len(self.rounds)

    @property
    def is_over(self) -> bool:
        return self.current_round >= self.total_rounds

    @property
    def winner(self) -> Optional[str]:
        if not self.is_over:
            return None
        if self.player_score > self.bot_score:
            return "player"
        if self.bot_score > self.player_score:
            return "bot"
        return "tie"

    @property
    def win_rate(self) -> int:
        if self.total_rounds <= 0:
            return 0
        return round_half_up(100.0 * self.player_score / self.total_rounds)

    def play(self, move: Union[Move, int, str]) -> RoundResult:
        if self.is_over:
            raise MatchOverError(self.total_rounds)
        player_move = Move.parse(move)
        # bot commits before the player's move enters its history
        bot_move = self.brain.choose_opponent_move()
        prediction = self.brain.last_prediction
        self.brain.record_player_move(player_move)
        outcome = self.brain.resolve_round(player_move, bot_move)
        if outcome is Outcome.WIN:
            self.player_score += 1
        elif outcome is Outcome.LOSE:
            self.bot_score += 1
        result = RoundResult(self.current_round + 1, player_move, bot_move, outcome, prediction)
        self.rounds.append(result)
        if self.is_over:
            logger.info("match finished %d-%d (%s)", self.player_score, self.bot_score, self.winner)
        return result

    def restart(self) -> None:
        self.player_score = 0
        self.bot_score = 0
        self.rounds = []
        self.brain.reset()

    def summary(self) -> Dict[str, Any]:
        return {
            "total_rounds": self.total_rounds,
            "current_round": self.current_round,
            "player_score": self.player_score,
            "bot_score": self.bot_score,
            "ties": sum(1 for r in self.rounds if r.outcome is Outcome.TIE),
            "history": [m.label for m in self.brain.moves],
            "game_over": self.is_over,
            "winner": self.winner,
            "win_rate": self.win_rate,
        }
