from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .utils import check_probability


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    return default if raw in (None, "") else float(raw)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    return default if raw in (None, "") else int(raw)


@dataclass(frozen=True)
class BrainConfig:
    """Tunables of the adaptive opponent. Defaults are the shipped behaviour."""

    counter_probability: float = 0.7
    cold_start_confidence: int = 33
    pattern_cap: int = 90
    frequency_cap: int = 75
    alternation_cap: int = 85
    alternation_bonus: int = 15
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        check_probability("counter_probability", self.counter_probability)

    @classmethod
    def from_env(cls) -> "BrainConfig":
        base = cls()
        return cls(
            counter_probability=_env_float("RPS_COUNTER_PROB", base.counter_probability),
            random_seed=_env_int("RPS_RANDOM_SEED", base.random_seed),
        )
